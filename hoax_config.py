# hoax_config.py
"""File locations used by a single training run."""
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class HoaxConfig:
    true_path: Path = Path("true.csv")
    fake_path: Path = Path("fake.csv")
    combined_path: Path = Path("combined.csv")
    model_path: Path = Path("model_hoax.zip")
    metrics_path: Path = Path("metrics.json")

    def __post_init__(self):
        # accept plain strings
        for name in ("true_path", "fake_path", "combined_path", "model_path", "metrics_path"):
            object.__setattr__(self, name, Path(getattr(self, name)))

    @classmethod
    def in_directory(cls, base):
        """Same file names, rooted in `base` instead of the working directory."""
        base = Path(base)
        defaults = cls()
        return cls(
            true_path=base / defaults.true_path,
            fake_path=base / defaults.fake_path,
            combined_path=base / defaults.combined_path,
            model_path=base / defaults.model_path,
            metrics_path=base / defaults.metrics_path,
        )
