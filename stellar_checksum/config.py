"""
Configuration management for stellar-checksum.

Handles settings for batch checking, such as which input lines are
skipped when account IDs are read from a file.
"""

import logging
from dataclasses import dataclass

logger = logging.getLogger(__name__)


@dataclass
class CheckerConfig:
    """
    Configuration for batch account ID checking.
    
    Attributes:
        comment_prefix: Lines starting with this prefix are treated as
                        comments and skipped. Default: "#".
        skip_blank_lines: If True, empty lines are skipped instead of being
                          reported as invalid account IDs. Default: True.
    """
    
    comment_prefix: str = "#"
    skip_blank_lines: bool = True
    
    def __post_init__(self):
        """Validate comment prefix."""
        if not self.comment_prefix:
            raise ValueError("comment_prefix must be a non-empty string.")
    
    def is_ignorable(self, line: str) -> bool:
        """
        Check if an input line should be skipped rather than checked.
        
        Args:
            line: Candidate line, already stripped of surrounding whitespace.
            
        Returns:
            True for comment lines, and for blank lines when skip_blank_lines
            is enabled.
        """
        if not line:
            return self.skip_blank_lines
        return line.startswith(self.comment_prefix)


def setup_logging(verbose: bool = False) -> None:
    """
    Configure logging for the application.
    
    Args:
        verbose: If True, sets log level to DEBUG. Otherwise, INFO.
    """
    log_level = logging.DEBUG if verbose else logging.INFO
    
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )
    
    if verbose:
        logger.debug("Verbose logging enabled")


# Global default configuration instance
default_config = CheckerConfig()
