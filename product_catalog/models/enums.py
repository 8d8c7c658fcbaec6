from enum import Enum


class SortField(str, Enum):
    NAME = "name"
    CATEGORY = "category"
    PRICE = "price"


class SortOrder(str, Enum):
    ASC = "asc"
    DESC = "desc"

    @classmethod
    def parse(cls, token) -> "SortOrder":
        """Only a case-insensitive "desc" sorts descending; anything else is ascending."""
        if isinstance(token, str) and token.lower() == cls.DESC.value:
            return cls.DESC
        return cls.ASC
