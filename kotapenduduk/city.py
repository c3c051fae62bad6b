"""Cities, each holding an ordered list of residents, kept in insertion order."""

from __future__ import annotations

import string
from collections.abc import Iterator
from dataclasses import dataclass

from kotapenduduk.linkedlist import LinkedList

MAX_CITY_NAME = 50
MAX_NAME_LENGTH = 50

_ALLOWED = frozenset(string.ascii_letters + " '")
_NO_DATA = "Belum ada data kota!\n"


class CityError(Exception):
    """Base class for registry errors."""


class InvalidNameError(CityError, ValueError):
    """A city or resident name breaks the naming rules."""


class DuplicateCityError(CityError):
    def __init__(self, name: str) -> None:
        super().__init__(f"Kota {name} sudah ada!")
        self.name = name


class CityNotFoundError(CityError, LookupError):
    def __init__(self, name: str) -> None:
        super().__init__(f"Kota {name} tidak ditemukan!")
        self.name = name


class DuplicateResidentError(CityError):
    def __init__(self, name: str) -> None:
        super().__init__(f"Penduduk {name} sudah ada!")
        self.name = name


def validate_name(name: str, is_city: bool) -> None:
    """Raise InvalidNameError unless the name is 1-49 letters, spaces or apostrophes."""
    max_len = MAX_CITY_NAME if is_city else MAX_NAME_LENGTH
    if not name or len(name) >= max_len:
        raise InvalidNameError(f"Nama harus 1-{max_len - 1} karakter!")
    if any(char not in _ALLOWED for char in name):
        raise InvalidNameError("Hanya boleh berisi huruf, spasi, atau apostrof!")


def is_valid_name(name: str, is_city: bool) -> bool:
    """Tell whether the name passes validate_name."""
    try:
        validate_name(name, is_city)
    except InvalidNameError:
        return False
    return True


class City:
    """A named city and its residents."""

    def __init__(self, name: str) -> None:
        self.name = name[: MAX_CITY_NAME - 1]
        self.residents = LinkedList()

    def __repr__(self) -> str:
        return f"City(name={self.name!r}, residents={list(self.residents)!r})"


@dataclass(frozen=True)
class Statistics:
    """Resident counts per city, totals and the most populated city."""

    per_city: tuple[tuple[str, int], ...]
    city_count: int
    resident_count: int
    densest: str
    densest_count: int


class CityRegistry:
    """Cities in the order they were added."""

    def __init__(self) -> None:
        self._cities: list[City] = []

    def __len__(self) -> int:
        return len(self._cities)

    def __iter__(self) -> Iterator[City]:
        return iter(self._cities)

    def add_city(self, name: str) -> City:
        """Append a new city; names are compared without regard to case."""
        validate_name(name, True)
        if self.find_city(name) is not None:
            raise DuplicateCityError(name)
        city = City(name)
        self._cities.append(city)
        return city

    def remove_city(self, name: str) -> City:
        """Remove the city whose name matches exactly, with its residents."""
        for city in self._cities:
            if city.name == name:
                city.residents.clear()
                self._cities.remove(city)
                return city
        raise CityNotFoundError(name)

    def find_city(self, name: str) -> City | None:
        """Return the city with this name, ignoring case, or None."""
        wanted = name.lower()
        return next((c for c in self._cities if c.name.lower() == wanted), None)

    def add_resident(self, city_name: str, resident_name: str) -> City:
        """Append a resident to a city; a resident may appear once per city."""
        validate_name(resident_name, False)
        city = self.find_city(city_name)
        if city is None:
            raise CityNotFoundError(city_name)
        if resident_name in city.residents:
            raise DuplicateResidentError(resident_name)
        city.residents.insert_last(resident_name)
        return city

    def find_resident(self, resident_name: str) -> list[tuple[str, str]]:
        """Return (resident, city) pairs whose resident matches, ignoring case."""
        wanted = resident_name.lower()
        return [
            (resident, city.name)
            for city in self._cities
            for resident in city.residents
            if resident.lower() == wanted
        ]

    def statistics(self) -> Statistics | None:
        """Summarise the registry, or return None when it holds no city."""
        if not self._cities:
            return None
        per_city = tuple((city.name, len(city.residents)) for city in self._cities)
        densest, densest_count = self._cities[0].name, 0
        for name, count in per_city:
            if count > densest_count:
                densest, densest_count = name, count
        return Statistics(
            per_city=per_city,
            city_count=len(self._cities),
            resident_count=sum(count for _, count in per_city),
            densest=densest,
            densest_count=densest_count,
        )

    def format_all(self) -> str:
        """Render every city followed by its residents, one line per city."""
        if not self._cities:
            return _NO_DATA
        return "".join(f"{city.name}: {city.residents}\n" for city in self._cities)

    def format_statistics(self) -> str:
        """Render the statistics report."""
        stats = self.statistics()
        if stats is None:
            return _NO_DATA
        lines = ["", "Statistik:"]
        lines.extend(f"- {name}: {count} penduduk" for name, count in stats.per_city)
        lines.append("")
        lines.append(f"Total: {stats.city_count} kota, {stats.resident_count} penduduk")
        lines.append(f"Kota terpadat: {stats.densest} ({stats.densest_count} penduduk)")
        return "\n".join(lines) + "\n"

    def clear(self) -> None:
        """Remove every city and resident."""
        for city in self._cities:
            city.residents.clear()
        self._cities.clear()