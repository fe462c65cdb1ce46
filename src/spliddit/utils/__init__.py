from .surrogates import (
    count_unpaired_surrogates,
    decode_code_point,
    first_code_unit,
    from_code_units,
    to_code_units,
)

__all__ = [
    "count_unpaired_surrogates",
    "decode_code_point",
    "first_code_unit",
    "from_code_units",
    "to_code_units",
]
