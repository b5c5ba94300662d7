from dataclasses import dataclass, field


@dataclass(frozen=True)
class VersionRecord:
    id: str
    timestamp: str
    content: str
    added_words: tuple[str, ...] = field(default_factory=tuple)
    removed_words: tuple[str, ...] = field(default_factory=tuple)
    old_length: int = 0
    new_length: int = 0
