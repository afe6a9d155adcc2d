from dataclasses import asdict, dataclass


@dataclass(frozen=True)
class CardCandidate:
    """A parsed front/back pair that has not been stored yet."""

    front: str
    back: str

    def to_dict(self) -> dict:
        return asdict(self)
