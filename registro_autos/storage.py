"""Binary and CSV files that hold the vehicle register."""

from __future__ import annotations

from dataclasses import replace
from enum import IntEnum
from pathlib import Path
from typing import BinaryIO, Iterator

from .carro import MAX_CHAR, RECORD_SIZE, Carro

CREATE_HEADER = (
    "Marca,SubMarca,Modelo,Placa,Color,Numero de serie,"
    "Fecha de Entrada,Fecha de Salida\n"
)
EXPORT_HEADER = (
    "Marca, SubMarca, Modelo, Placa, Color, Numero de serie, "
    "Fecha de Entrada, Fecha de Salida\n"
)


class EditableField(IntEnum):
    """Fields of a record that may be changed after it is stored."""

    COLOR = 1
    FECHA_IN = 2
    FECHA_OUT = 3

    @property
    def attribute(self) -> str:
        return self.name.lower()


class RecordLimitError(Exception):
    """Raised when no more records may be added in a session."""


def _path(base: str, extension: str) -> Path:
    return Path(f"{base}{extension}"[: MAX_CHAR - 1])


def bin_path(base: str) -> Path:
    """Path of the binary file for a base name."""
    return _path(base, ".bin")


def csv_path(base: str) -> Path:
    """Path of the CSV file for a base name."""
    return _path(base, ".csv")


def create_files(base: str) -> tuple[Path, Path]:
    """Create an empty binary file and a CSV file holding only its header."""
    binary, text = bin_path(base), csv_path(base)
    binary.write_bytes(b"")
    text.write_text(CREATE_HEADER, encoding="utf-8")
    return binary, text


def files_exist(base: str) -> bool:
    """Whether both files of a base name exist."""
    return bin_path(base).is_file() and csv_path(base).is_file()


def append_record(base: str, carro: Carro) -> None:
    """Append one record to the binary file, creating it if needed."""
    with bin_path(base).open("ab") as fh:
        fh.write(carro.pack())


def _iter_records(fh: BinaryIO) -> Iterator[Carro]:
    while len(chunk := fh.read(RECORD_SIZE)) == RECORD_SIZE:
        yield Carro.unpack(chunk)


def read_records(base: str) -> list[Carro]:
    """Return every complete record stored in the binary file."""
    with bin_path(base).open("rb") as fh:
        return list(_iter_records(fh))


def export_csv(base: str) -> Path:
    """Rewrite the CSV file from the records in the binary file."""
    records = read_records(base)
    target = csv_path(base)
    with target.open("w", encoding="utf-8") as fh:
        fh.write(EXPORT_HEADER)
        fh.writelines(f"{carro.csv_row()}\n" for carro in records)
    return target


def find_record(base: str, placas: str) -> Carro | None:
    """Return the first record with the given plates, or None."""
    return next((c for c in read_records(base) if c.placas == placas), None)


def modify_record(base: str, placas: str, field: EditableField | int, value: str) -> Carro:
    """Change one field of the first record with the given plates, in place.

    Raises KeyError when no record has those plates.
    """
    field = EditableField(field)
    with bin_path(base).open("r+b") as fh:
        for index, carro in enumerate(_iter_records(fh)):
            if carro.placas == placas:
                packed = replace(carro, **{field.attribute: value}).pack()
                fh.seek(index * RECORD_SIZE)
                fh.write(packed)
                return Carro.unpack(packed)
    raise KeyError(placas)


def delete_files(base: str) -> tuple[Path, Path]:
    """Remove the binary file and then the CSV file of a base name."""
    binary, text = bin_path(base), csv_path(base)
    binary.unlink()
    text.unlink()
    return binary, text