"""
NIC Reassign - Progress Tracking

Provides visual progress feedback for the forward action sequence.
"""

import sys

from tqdm import tqdm


class ProgressTracker:
    """
    Track progress of a run with a tqdm progress bar.

    Example:
        tracker = ProgressTracker(total_steps=9, desc="Reassign NIC")
        tracker.start()

        tracker.update_step("Deallocate VM zca-vm")
        # ... do work ...
        tracker.advance()

        tracker.finish()
    """

    def __init__(self, total_steps: int, desc: str = "Operation"):
        """
        Initialize progress tracker.

        Args:
            total_steps: Total number of steps in the run
            desc: Description of the run
        """
        self.total_steps = total_steps
        self.current_step = 0
        self.desc = desc
        self.current_step_name = ""
        self.bar = None

    def start(self):
        """Start the progress tracker."""
        self.current_step = 0
        self.bar = tqdm(
            total=self.total_steps,
            desc=self.desc,
            bar_format='{desc}: {percentage:3.0f}%|{bar}| {n_fmt}/{total_fmt} [{elapsed}]',
            ncols=80,
            file=sys.stdout,
            leave=False
        )

    def update_step(self, step_name: str):
        """Update the current step name."""
        self.current_step_name = step_name
        if self.bar:
            self.bar.set_description(f"{self.desc} - {step_name}")

    def advance(self, steps: int = 1):
        """Advance the progress by one or more steps."""
        self.current_step += steps
        if self.bar:
            self.bar.update(steps)

    def finish(self):
        """Finish the progress tracker."""
        if self.bar:
            self.bar.close()
            self.bar = None


class SimpleProgressTracker:
    """
    Progress tracker without any output.

    Used in verbose mode (the log already shows every step) and in tests.
    """

    def __init__(self, total_steps: int = 0, desc: str = "Operation"):
        self.total_steps = total_steps
        self.current_step = 0

    def start(self):
        """Start tracking (no-op)."""
        pass

    def update_step(self, step_name: str):
        """Update step (no-op)."""
        pass

    def advance(self, steps: int = 1):
        """Count the step, show nothing."""
        self.current_step += steps

    def finish(self):
        """Finish tracking (no-op)."""
        pass


def create_progress_tracker(total_steps: int, desc: str = "Operation",
                            enabled: bool = True):
    """
    Factory function to create appropriate progress tracker.

    Args:
        total_steps: Total number of steps
        desc: Description of operation
        enabled: Whether to show progress at all

    Returns:
        ProgressTracker or SimpleProgressTracker instance
    """
    if not enabled:
        return SimpleProgressTracker(total_steps, desc)
    return ProgressTracker(total_steps, desc)
