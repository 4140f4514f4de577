"""The sum of its parts: order steps and time their completion by workers."""

import re
from dataclasses import dataclass, field

_RULE = re.compile(r"Step (.) must be finished before step (.)")


@dataclass
class _Worker:
    job: str | None = None
    time: int = 0

    @property
    def available(self):
        return self.job is None

    def assign(self, job, time):
        self.job = job
        self.time = time

    def tick(self):
        """Advance one second; return the job if it was just completed."""
        if self.job is None:
            return None
        self.time -= 1
        if self.time == 0:
            done, self.job = self.job, None
            return done
        return None


@dataclass
class Process:
    """Steps and, for each step, the steps it requires to be finished first."""

    steps: set
    requirements: dict = field(default_factory=dict)

    def available(self, finished):
        """Unfinished steps whose requirements are all finished, sorted."""
        return sorted(
            step
            for step in self.steps
            if step not in finished
            and self.requirements.get(step, set()) <= finished
        )

    def ordering(self):
        """Order of steps, picking the alphabetically first when several are ready."""
        finished = set()
        order = []
        while len(finished) != len(self.steps):
            ready = self.available(finished)
            if not ready:
                raise ValueError("steps have circular requirements")
            order.append(ready[0])
            finished.add(ready[0])
        return order

    def completion_time(self, n_workers, step_time):
        """Seconds needed to finish every step with n_workers working at once."""
        if n_workers < 1:
            raise ValueError("at least one worker is needed")
        workers = [_Worker() for _ in range(n_workers)]
        finished = set()
        second = 0
        while len(finished) != len(self.steps):
            for worker in workers:
                done = worker.tick()
                if done is not None:
                    finished.add(done)

            for step in self.available(finished):
                doing = {w.job for w in workers if not w.available}
                free = next((w for w in workers if w.available), None)
                if step in doing or free is None:
                    continue
                time = step_time(step)
                if time < 1:
                    raise ValueError(f"step {step!r} must take at least one second")
                free.assign(step, time)

            if all(w.available for w in workers) and not self.available(finished) \
                    and len(finished) != len(self.steps):
                raise ValueError("steps have circular requirements")
            second += 1
        return second - 1


def parse(text):
    """Return (set of steps, dict from step to the set of steps it requires)."""
    steps = set()
    requirements = {}
    for before, after in _RULE.findall(text):
        steps.update((before, after))
        requirements.setdefault(after, set()).add(before)
    for step in steps:
        requirements.setdefault(step, set())
    return steps, requirements