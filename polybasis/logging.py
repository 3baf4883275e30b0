"""A small logging framework that supports timing and indented log messages.

Important functions:
 - task: a context manager to wrap self-contained computations (divisions,
   root extraction, fits, ...)
 - event: print a log message (indented based on active tasks)
 - dump_profile: write accumulated task timings to `--profile-path`
"""

from collections import defaultdict
from contextlib import contextmanager
import datetime
import threading

from polybasis.opts import Option

verbose = Option("verbose", bool, False, description="Print progress of polynomial computations")
profile_path = Option("profile-path", str, "/tmp/polybasis.profile", metavar="PATH", description="Where dump_profile writes task timings")

_times = defaultdict(float)
_times_lock = threading.Lock()
_local = threading.local()
_begin = datetime.datetime.now()

def _task_stack():
    """The stack of active tasks for the calling thread."""
    stack = getattr(_local, "stack", None)
    if stack is None:
        stack = _local.stack = []
    return stack

def log(string):
    if verbose.value:
        print(string)

def task_begin(name, **kwargs):
    start = datetime.datetime.now()
    stack = _task_stack()
    stack.append((name, start))
    if not verbose.value:
        return
    indent = "  " * (len(stack) - 1)
    log("{indent}{name}{maybe_kwargs}...".format(
        indent = indent,
        name   = name,
        maybe_kwargs = (" [" + ", ".join("{}={}".format(k, v) for k, v in kwargs.items()) + "]") if kwargs else ""))

def task_end():
    end = datetime.datetime.now()
    stack = _task_stack()
    key = tuple(name for name, start in stack)
    name, start = stack.pop()
    duration = (end-start).total_seconds()
    with _times_lock:
        _times[key] += duration
    if not verbose.value:
        return
    indent = "  " * len(stack)
    log("{indent}Finished {name} [duration={duration:.3}s]".format(indent=indent, name=name, duration=duration))

@contextmanager
def task(name, **kwargs):
    try:
        yield task_begin(name, **kwargs)
    finally:
        task_end()

def event(name):
    if not verbose.value:
        return
    indent = "  " * len(_task_stack())
    log("{indent}{name}".format(indent=indent, name=name))

def recorded_tasks():
    """Return the task paths that have been timed so far."""
    with _times_lock:
        return list(_times.keys())

def dump_profile():
    duration = (datetime.datetime.now() - _begin).total_seconds()
    with _times_lock:
        times = dict(_times)
    with open(profile_path.value, "w") as f:
        f.write("Total duration: {:.3} seconds\n".format(duration))
        f.write("Currently in: {}\n\n".format(", ".join(name for (name, start) in _task_stack())))
        for k in sorted(times.keys(), key=times.get, reverse=True):
            f.write("{:16.3}".format(times[k]))
            f.write(" ")
            f.write(", ".join(k))
            f.write("\n")
