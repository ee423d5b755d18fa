# domain/entities/client.py
import string

from cafe_sim.domain.errors import InvalidName

# Closing order rank: digits, then lowercase letters, then "_", then "-".
ALPHABET = string.digits + string.ascii_lowercase + "_-"
_RANK = {c: i for i, c in enumerate(ALPHABET)}


def is_valid_client_name(name: str) -> bool:
    return bool(name) and all(c in _RANK for c in name)


def check_client_name(name: str) -> str:
    if not isinstance(name, str) or not is_valid_client_name(name):
        raise InvalidName(f"invalid client name: {name!r}")
    return name


def closing_order_key(name: str) -> tuple[int, ...]:
    """Sort key for the end-of-day departures.

    Characters compare by their rank in ALPHABET; when one name is a prefix of
    the other the shorter one comes first (tuple comparison does exactly that).
    """
    try:
        return tuple(_RANK[c] for c in name)
    except KeyError as exc:
        raise InvalidName(f"invalid character in client name: {exc.args[0]!r}") from None
