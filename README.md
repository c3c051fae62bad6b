# kotapenduduk

kotapenduduk keeps a register of cities and the people who live in them.
You can use it in two ways:

- as an interactive menu in the terminal
- as a library from your own Python code

The messages it prints are in Indonesian.

## Installation

```
pip install .
```

## Interactive menu

```
kotapenduduk
```

The menu offers these choices:

1. Tambah Kota: add a city.
2. Tambah Penduduk: add a resident to a city. The city name may be given in any case.
3. Hapus Kota: remove a city and all of its residents. The city name must match exactly.
4. Tampilkan Semua Data: list every city with its residents, for example `Bandung: Asep -> Siti`.
5. Cari Penduduk: search every city for a resident. The match ignores case.
6. Tampilkan Statistik: show residents per city, the totals, and the most populous city.
7. Keluar: quit.

If a choice does not start with a number, the menu prints `Error: Input harus angka!`.
If the number is outside 1–7, it prints `Error: Pilihan tidak valid!`. In both cases it
asks again. The menu also ends when input runs out.

Names must be 1–49 characters long. They may contain only ASCII letters, spaces and
apostrophes. City names must be unique, and the check ignores case. A resident name
must be unique within its city, and that check is case-sensitive.

## Library use

```python
from kotapenduduk.city import CityRegistry, DuplicateCityError

registry = CityRegistry()
registry.add_city("Bandung")
registry.add_resident("Bandung", "Asep")
registry.add_resident("Bandung", "Siti")

print(registry.format_all())           # Bandung: Asep -> Siti
print(registry.find_resident("siti"))  # [('Siti', 'Bandung')]

try:
    registry.add_city("bandung")
except DuplicateCityError as exc:
    print(exc)                         # Kota bandung sudah ada!

print(registry.format_statistics())
```

`CityRegistry` has these methods:

- `add_city`, `remove_city`, `find_city` and `add_resident`. Each returns the `City` it acted on. `find_city` returns `None` when there is no match.
- `find_resident`, which returns `(resident, city)` pairs.
- `clear`.

The registry has a length, and iterating over it gives its cities in the order they
were added. Each `City` has a `name` and a `residents` list.

`CityRegistry.statistics()` returns a `Statistics` record, or `None` when the
registry is empty. The record holds:

- `per_city`
- `city_count`
- `resident_count`
- `densest`
- `densest_count`

`validate_name(name, is_city)` raises `InvalidNameError` for a name that breaks the
rules. `is_valid_name(name, is_city)` returns `True` or `False` instead.

Failures raise exceptions that derive from `CityError`:

- `InvalidNameError`
- `DuplicateCityError`
- `CityNotFoundError`
- `DuplicateResidentError`

`kotapenduduk.linkedlist.LinkedList` is the ordered list that holds each city's
residents. It provides these operations:

- `insert_first`, `insert_last` and `insert_after`
- `delete_first` and `delete_last`, which return the removed value
- `delete` and `clear`

It also supports iteration, `len`, `in` and `str`. Stored values are cut to 49
characters. A failed operation raises `EmptyListError` or `ValueNotFoundError`.

## What it does not do

The register lives in memory only. Nothing is saved to disk, so every city and
resident is gone when the menu exits.

## Running the tests

```
pip install ".[test]"
pytest
```