import os
import tomllib
from dataclasses import dataclass

_ELEMENT_TYPES = {"int": int, "float": float}


def _read_toml(config_path: str) -> dict:
    if not os.path.exists(config_path):
        raise FileNotFoundError(f"Configuration file not found at {config_path}")

    with open(config_path, "rb") as f:
        return tomllib.load(f)


@dataclass
class DemoConfiguration:
    """Configuration for a single scale-and-render demonstration."""

    rows: int = 3
    cols: int = 3
    dtype: str = "float"
    fill_value: float = 5.0
    scalar: float = 3.0
    reflected: bool = False  # scalar * tensor instead of tensor * scalar

    def __post_init__(self):
        """Reject element type names other than "int" and "float"."""
        if self.dtype not in _ELEMENT_TYPES:
            raise ValueError(
                f"Unsupported dtype {self.dtype!r}; expected one of "
                f"{sorted(_ELEMENT_TYPES)}"
            )

    @property
    def element_type(self) -> type:
        """Python type matching `dtype`."""
        return _ELEMENT_TYPES[self.dtype]

    @classmethod
    def load(cls, config_path: str) -> "DemoConfiguration":
        """
        Load demonstration configuration from a TOML file.

        Parameters
        ----------
        config_path : str
            Filesystem path to a TOML file containing a "demo" table.

        Returns
        -------
        DemoConfiguration
            Instance populated from the "demo" table; missing fields use
            their dataclass defaults.

        Raises
        ------
        FileNotFoundError
            If no file exists at `config_path`.
        ValueError
            If `dtype` is neither "int" nor "float".
        """
        data = _read_toml(config_path)
        # [demo.defaults] and [[demo.runs]] belong to BatchDemoConfiguration
        demo_data = {
            key: value
            for key, value in data.get("demo", {}).items()
            if key not in ("defaults", "runs")
        }
        return cls(**demo_data)


@dataclass
class BatchDemoConfiguration:
    """Configuration for running several demonstrations in a row."""

    runs: list[DemoConfiguration]

    @classmethod
    def load(cls, config_path: str) -> "BatchDemoConfiguration":
        """
        Load batch demonstration configuration from a TOML file.

        The file should contain [[demo.runs]] entries. Shared defaults can be
        set in [demo.defaults]; values in a run override them.

        Parameters
        ----------
        config_path : str
            Filesystem path to a TOML file.

        Returns
        -------
        BatchDemoConfiguration
            Instance with one DemoConfiguration per run.

        Raises
        ------
        FileNotFoundError
            If no file exists at `config_path`.
        """
        data = _read_toml(config_path)

        demo_data = data.get("demo", {})
        defaults = demo_data.get("defaults", {})
        runs_data = demo_data.get("runs", [])

        runs = []
        for run_data in runs_data:
            merged = {**defaults, **run_data}
            runs.append(DemoConfiguration(**merged))

        return cls(runs=runs)
