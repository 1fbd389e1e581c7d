from typing import List


class ReadPropertiesError(Exception):
    """Base exception for every fatal condition of a run."""
    pass

class PropertiesNotFoundError(ReadPropertiesError):
    pass

class PropertiesFileNotFoundError(PropertiesNotFoundError):
    def __init__(self, pattern: str, ignored: List[str]):
        msg = f"No properties files found with pattern {pattern}"
        super().__init__(msg)
        self.pattern = pattern
        self.ignored = ignored

class PropertyNotFoundError(PropertiesNotFoundError):
    def __init__(self, property_name: str, source_file: str):
        msg = f"Property {property_name} not found in {source_file}"
        super().__init__(msg)
        self.property_name = property_name
        self.source_file = source_file

class InvalidInputError(ReadPropertiesError, ValueError):
    """Raised when an input or the resolved file cannot be used."""
    pass
