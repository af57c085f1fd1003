"""Facade: one workflow call hiding job, tracker and developer."""

from typing import List

from pattern_catalog.domain.demo import Trace

SUMMARY = "The facade pattern is used to define a simplified interface to a more complex subsystem."


class Job:
    def __init__(self, trace: Trace):
        self.trace = trace

    def do_job(self) -> None:
        self.trace.emit("Job is progress...")


class BugTracker:
    def __init__(self, trace: Trace):
        self.trace = trace
        self.is_active_sprint = False

    def start_sprint(self) -> None:
        self.trace.emit("Sprint is active")
        self.is_active_sprint = True

    def stop_sprint(self) -> None:
        self.trace.emit("Sprint is not active")
        self.is_active_sprint = False


class Developer:
    def __init__(self, trace: Trace):
        self.trace = trace

    def do_job_before_deadline(self, bug_tracker: BugTracker) -> None:
        if bug_tracker.is_active_sprint:
            self.trace.emit("Developer is solving problems...")
        else:
            self.trace.emit("Developer is reading the news...")


class Workflow:
    def __init__(self, trace: Trace):
        self.developer = Developer(trace)
        self.job = Job(trace)
        self.bug_tracker = BugTracker(trace)

    def solve_problems(self) -> None:
        self.job.do_job()
        self.bug_tracker.start_sprint()
        self.developer.do_job_before_deadline(self.bug_tracker)


def run() -> List[str]:
    trace = Trace()
    Workflow(trace).solve_problems()
    return trace.lines
