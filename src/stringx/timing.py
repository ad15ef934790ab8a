import time
import sys
from contextlib import contextmanager
from collections import OrderedDict


class Timer:
    """Timer for the operations the stringx command line runs.

    Disabled timers cost one attribute lookup per call and report nothing.
    """

    def __init__(self, enabled=False):
        self.enabled = enabled
        self.timings = OrderedDict()  # Operation name -> accumulated elapsed time
        self.counts = OrderedDict()  # Operation name -> number of runs
        self.start_times = {}  # Operation name -> start time

    def start(self, operation_name):
        """Start timing an operation."""
        if not self.enabled:
            return
        self.start_times[operation_name] = time.perf_counter()

    def stop(self, operation_name):
        """Stop timing an operation and add the elapsed time to its total."""
        if not self.enabled:
            return 0.0

        current_time = time.perf_counter()
        if operation_name not in self.start_times:
            return 0.0

        elapsed = current_time - self.start_times.pop(operation_name)
        self.timings[operation_name] = self.timings.get(operation_name, 0.0) + elapsed
        self.counts[operation_name] = self.counts.get(operation_name, 0) + 1
        return elapsed

    @contextmanager
    def time_operation(self, operation_name):
        """Context manager for timing operations."""
        self.start(operation_name)
        try:
            yield
        finally:
            self.stop(operation_name)

    def get_elapsed(self, operation_name):
        return self.timings.get(operation_name, 0.0)

    def format_time(self, seconds):
        """Format time in microseconds for precision."""
        microseconds = seconds * 1_000_000
        if microseconds < 1000:
            return f"{microseconds:.0f}µs"
        elif microseconds < 1_000_000:
            return f"{microseconds / 1000:.1f}ms"
        elif seconds < 60.0:
            return f"{seconds:.1f}s"
        else:
            minutes = int(seconds // 60)
            secs = seconds % 60
            return f"{minutes}m{secs:.1f}s"

    def report(self, verbose_level, file=None):
        """Print the total, and per operation times from verbose level 1."""
        if not self.enabled or not self.timings:
            return

        if file is None:
            file = sys.stderr

        total_time = sum(self.timings.values())
        print(f"Total time: {self.format_time(total_time)}", file=file)

        if verbose_level >= 1:
            width = max(len(name) for name in self.timings)
            for name, elapsed in self.timings.items():
                count = self.counts[name]
                line = f"  {name:<{width}}  {self.format_time(elapsed)}"
                if verbose_level >= 2 and count > 1:
                    line += f"  ({count} runs, {self.format_time(elapsed / count)} each)"
                print(line, file=file)
