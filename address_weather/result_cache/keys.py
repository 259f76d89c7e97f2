"""Cache key strategies: map an address to the key its forecast is stored under."""

from typing import Callable, Dict

from address_weather.domain import Address

KeyFunc = Callable[[Address], str]


def zipcode_key(address: Address) -> str:
    """Key on the zipcode alone; every address in a zipcode shares one forecast."""
    return address.zipcode


def full_address_key(address: Address) -> str:
    """Key on the whole address, case- and whitespace-insensitive."""
    parts = (address.street, address.city, address.state, address.zipcode)
    return "|".join(" ".join(part.split()).lower() for part in parts)


KEY_STRATEGIES: Dict[str, KeyFunc] = {
    "zipcode": zipcode_key,
    "address": full_address_key,
}


def key_strategy(name: str) -> KeyFunc:
    """Look up a key strategy by its configured name."""
    try:
        return KEY_STRATEGIES[name]
    except KeyError:
        raise ValueError(f"Unknown cache key strategy '{name}'") from None
