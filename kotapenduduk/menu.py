"""Interactive text menu for managing cities and their residents."""

from __future__ import annotations

import re
import sys
from collections.abc import Callable
from typing import TextIO

from kotapenduduk.city import CityError, CityRegistry

_MENU = (
    "\nMenu:\n"
    "1. Tambah Kota\n"
    "2. Tambah Penduduk\n"
    "3. Hapus Kota\n"
    "4. Tampilkan Semua Data\n"
    "5. Cari Penduduk\n"
    "6. Tampilkan Statistik\n"
    "7. Keluar\n"
    "Pilihan: "
)
_EXIT = 7
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def show_menu(out: TextIO | None = None) -> None:
    """Write the main menu and the choice prompt."""
    out = out or sys.stdout
    out.write(_MENU)
    out.flush()


def read_choice(inp: TextIO | None = None, out: TextIO | None = None) -> int:
    """Read lines until one starts with a number from 1 to 7; raise EOFError at end."""
    inp = inp or sys.stdin
    out = out or sys.stdout
    while True:
        line = inp.readline()
        if not line:
            raise EOFError
        if not line.strip():
            continue
        match = _LEADING_INT.match(line)
        if match is None:
            out.write("Error: Input harus angka!\n")
            continue
        choice = int(match.group(1))
        if not 1 <= choice <= _EXIT:
            out.write("Error: Pilihan tidak valid!\n")
            continue
        return choice


def _ask(inp: TextIO, out: TextIO, prompt: str) -> str:
    out.write(prompt)
    out.flush()
    line = inp.readline()
    if not line:
        raise EOFError
    return line.split("\n", 1)[0]


def _add_city(registry: CityRegistry, inp: TextIO, out: TextIO) -> None:
    name = _ask(inp, out, "Nama Kota: ")
    registry.add_city(name)
    out.write(f"Kota {name} ditambahkan.\n")


def _add_resident(registry: CityRegistry, inp: TextIO, out: TextIO) -> None:
    city = _ask(inp, out, "Nama Kota: ")
    resident = _ask(inp, out, "Nama Penduduk: ")
    registry.add_resident(city, resident)
    out.write(f"{resident} ditambahkan ke {city}.\n")


def _remove_city(registry: CityRegistry, inp: TextIO, out: TextIO) -> None:
    name = _ask(inp, out, "Nama Kota yang Dihapus: ")
    registry.remove_city(name)
    out.write(f"Kota {name} dihapus.\n")


def _show_all(registry: CityRegistry, inp: TextIO, out: TextIO) -> None:
    out.write(registry.format_all())


def _find_resident(registry: CityRegistry, inp: TextIO, out: TextIO) -> None:
    name = _ask(inp, out, "Nama Penduduk yang Dicari: ")
    matches = registry.find_resident(name)
    if not matches:
        out.write(f"Penduduk '{name}' tidak ditemukan.\n")
    for resident, city in matches:
        out.write(f"- {resident} (Kota: {city})\n")


def _show_statistics(registry: CityRegistry, inp: TextIO, out: TextIO) -> None:
    out.write(registry.format_statistics())


_ACTIONS: dict[int, Callable[[CityRegistry, TextIO, TextIO], None]] = {
    1: _add_city,
    2: _add_resident,
    3: _remove_city,
    4: _show_all,
    5: _find_resident,
    6: _show_statistics,
}


def run_menu(inp: TextIO | None = None, out: TextIO | None = None) -> CityRegistry:
    """Run the menu loop until the user exits or input ends; return the registry."""
    inp = inp or sys.stdin
    out = out or sys.stdout
    registry = CityRegistry()
    try:
        while True:
            show_menu(out)
            choice = read_choice(inp, out)
            if choice == _EXIT:
                out.write("Program selesai.\n")
                break
            try:
                _ACTIONS[choice](registry, inp, out)
            except CityError as exc:
                out.write(f"Error: {exc}\n")
    except EOFError:
        pass
    out.flush()
    return registry


def main(argv: list[str] | None = None) -> int:
    """Start the interactive menu on standard input and output."""
    run_menu(sys.stdin, sys.stdout)
    return 0