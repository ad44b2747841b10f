import time


class Deadline:
    """Wall-clock budget polled by the search loop."""

    def __init__(self, seconds, clock=time.monotonic):
        self.seconds = seconds
        self.clock = clock
        self.start_time = clock()

    @classmethod
    def from_minutes(cls, minutes, clock=time.monotonic):
        return cls(minutes * 60, clock=clock)

    def elapsed(self):
        return self.clock() - self.start_time

    def remaining(self):
        return max(0.0, self.seconds - self.elapsed())

    def expired(self):
        return self.remaining() <= 0


def as_deadline(time_budget):
    """Accept anything with an `expired()` method, or a number of seconds."""
    if hasattr(time_budget, 'expired'):
        return time_budget
    return Deadline(float(time_budget))


def describe_indices(msg, indices, cutoff=25):
    indices = sorted(indices)
    return f"{msg} {len(indices)} ({indices[:cutoff]}{'...' if len(indices) > cutoff else ''})"


def plot_history(history, path=None, title='LNS Progress'):
    """Plot the objective after each iteration; save to `path` or show the figure."""
    import matplotlib.pyplot as plt

    fig, ax = plt.subplots()
    ax.plot(history, marker='o', markersize=2)
    ax.set_xlabel('Iteration')
    ax.set_ylabel('Objective Value')
    ax.set_title(title)
    ax.grid(True)
    if path is None:
        plt.show()
    else:
        fig.savefig(path)
    plt.close(fig)
