from __future__ import annotations


class ValidationError(ValueError):
    def __init__(self, errors: dict[str, str]) -> None:
        self.errors = dict(errors)
        fields = ", ".join(f"{field}={code}" for field, code in sorted(self.errors.items()))
        super().__init__(f"Invalid part fields: {fields}")


class PersistenceError(RuntimeError):
    pass
