from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Mapping, Optional

_CAMEL_KEYS = {
    "timeQuantum": "time_quantum",
    "numberOfQueues": "number_of_queues",
    "quantumMultiplier": "quantum_multiplier",
    "isPreemptive": "is_preemptive",
    "priorityHighIsMin": "priority_high_is_min",
}


@dataclass(frozen=True)
class AlgorithmConfig:
    """
    Settings shared by every algorithm. Each algorithm reads only the fields
    it needs and ignores the rest.

    ``is_preemptive`` left as None means "use the algorithm's default", which
    is non-preemptive for FCFS, SJF and Priority.
    """

    time_quantum: int = 2
    number_of_queues: int = 3
    quantum_multiplier: int = 2
    is_preemptive: Optional[bool] = None
    priority_high_is_min: bool = True

    def __post_init__(self) -> None:
        if self.time_quantum < 1:
            raise ValueError(f"time_quantum must be >= 1 (got {self.time_quantum})")
        if self.number_of_queues < 2:
            raise ValueError(f"number_of_queues must be >= 2 (got {self.number_of_queues})")
        if self.quantum_multiplier < 1:
            raise ValueError(f"quantum_multiplier must be >= 1 (got {self.quantum_multiplier})")

    @property
    def preemptive(self) -> bool:
        return bool(self.is_preemptive)

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> "AlgorithmConfig":
        """
        Build a config from UI-style keys (``timeQuantum`` ...) or the
        snake_case field names. Unknown keys and None values are ignored.
        """
        known = {f.name for f in fields(cls)}
        kwargs = {}
        for key, value in mapping.items():
            name = _CAMEL_KEYS.get(key, key)
            if name in known and value is not None:
                kwargs[name] = value
        return cls(**kwargs)


DEFAULT_CONFIG = AlgorithmConfig()


def coerce_config(config: "AlgorithmConfig | Mapping[str, Any] | None") -> AlgorithmConfig:
    if config is None:
        return DEFAULT_CONFIG
    if isinstance(config, AlgorithmConfig):
        return config
    return AlgorithmConfig.from_mapping(config)
