"""Base model class for all sqlfrags value types."""

from typing import Any, ClassVar, Dict, FrozenSet, List

from pydantic import BaseModel, ConfigDict


class FragBaseModel(BaseModel):
    """Immutable base model for references, conditions and fragments.

    Provides common functionality for all sqlfrags models including:
    - Frozen instances (value semantics, safe to share between queries)
    - Positional construction in field declaration order
    - Serialization to dictionary via to_dict()

    Variant tag fields (``fragment_type`` / ``condition_type``) are excluded
    from positional construction, so ``SelectRaw(["*"])`` and
    ``SelectRaw(items=["*"])`` build the same value.
    """
    model_config = ConfigDict(
        arbitrary_types_allowed=True,
        coerce_numbers_to_str=True,
        frozen=True,
    )

    _tag_fields: ClassVar[FrozenSet[str]] = frozenset({"fragment_type", "condition_type"})

    def __init__(self, *args: Any, **data: Any) -> None:
        if args:
            names = self._payload_fields()
            if len(args) > len(names):
                raise TypeError(
                    f"{type(self).__name__} takes at most {len(names)} positional "
                    f"arguments ({len(args)} given)"
                )
            for name, value in zip(names, args):
                if name in data:
                    raise TypeError(
                        f"{type(self).__name__} got multiple values for argument '{name}'"
                    )
                data[name] = value
        super().__init__(**data)

    @classmethod
    def _payload_fields(cls) -> List[str]:
        return [name for name in cls.model_fields if name not in cls._tag_fields]

    def to_dict(self) -> Dict[str, Any]:
        """Convert model to dictionary for serialization.

        Nested models are converted recursively and enum tags are reduced to
        their values, so the result is JSON serializable.

        Returns:
            Dictionary representation suitable for JSON serialization
        """
        return self.model_dump(mode="json", exclude_none=True)
