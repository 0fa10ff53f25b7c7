from dataclasses import dataclass, field


@dataclass(frozen=True)
class Target:
    group: str  # e.g. Chest, Shoulder, Biceps...
    subregion: str = ''  # e.g. Mid Chest (Sternal Pectoralis Major)


@dataclass(frozen=True)
class Exercise:
    name: str
    targets: tuple = field(default_factory=tuple)

    def __post_init__(self):
        # Accept any iterable of targets but store it frozen
        object.__setattr__(self, 'targets', tuple(self.targets))

    @property
    def groups(self):
        """Distinct group labels in first-seen order."""
        return list(dict.fromkeys(t.group for t in self.targets))
