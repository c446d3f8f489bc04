"""Utils package."""

from nic_reassign.utils.logger import setup_logging
from nic_reassign.utils.progress import ProgressTracker, SimpleProgressTracker, create_progress_tracker

__all__ = [
    'setup_logging',
    'ProgressTracker',
    'SimpleProgressTracker',
    'create_progress_tracker'
]
