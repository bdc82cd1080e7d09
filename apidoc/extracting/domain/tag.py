from dataclasses import dataclass


@dataclass(frozen=True)
class Tag:
    """
    A single annotation tag read from a route handler's docstring.
    """
    name: str
    content: str

    def is_named(self, *names: str) -> bool:
        return self.name.lower() in names
