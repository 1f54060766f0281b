"""Vehicle record and its fixed-size binary layout."""

from __future__ import annotations

import struct
from dataclasses import astuple, dataclass

MAX_CHAR = 50
MAX_REGISTROS = 50

_TEXT = f"{MAX_CHAR}s"
# Two text fields, a 32-bit model year, five text fields, two bytes of padding.
_LAYOUT = struct.Struct("<" + _TEXT * 2 + "i" + _TEXT * 5 + "2x")
RECORD_SIZE = _LAYOUT.size

LABELS = (
    "Marca",
    "SubMarca",
    "Modelo",
    "Placas",
    "Color",
    "Número de serie",
    "Fecha de Entrada",
    "Fecha de Salida",
)


def _encode(text: str) -> bytes:
    """Encode text as UTF-8, cut to fit a NUL-terminated field."""
    raw = text.encode("utf-8")[: MAX_CHAR - 1]
    return raw.decode("utf-8", "ignore").encode("utf-8")


def _decode(raw: bytes) -> str:
    return raw.split(b"\0", 1)[0].decode("utf-8", "replace")


@dataclass
class Carro:
    """One vehicle entry of the register."""

    marca: str = ""
    submarca: str = ""
    modelo: int = 0
    placas: str = ""
    color: str = ""
    num_serie: str = ""
    fecha_in: str = ""
    fecha_out: str = ""

    def pack(self) -> bytes:
        """Return the record as a fixed-size binary block."""
        try:
            return _LAYOUT.pack(
                _encode(self.marca),
                _encode(self.submarca),
                self.modelo,
                _encode(self.placas),
                _encode(self.color),
                _encode(self.num_serie),
                _encode(self.fecha_in),
                _encode(self.fecha_out),
            )
        except struct.error as exc:
            raise ValueError(f"modelo fuera de rango: {self.modelo}") from exc

    @classmethod
    def unpack(cls, data: bytes) -> "Carro":
        """Build a record from a binary block made by pack()."""
        if len(data) != RECORD_SIZE:
            raise ValueError(
                f"se esperaban {RECORD_SIZE} bytes, se recibieron {len(data)}"
            )
        marca, submarca, modelo, *rest = _LAYOUT.unpack(data)
        return cls(_decode(marca), _decode(submarca), modelo, *map(_decode, rest))

    def csv_row(self) -> str:
        """Return the record as one line of the exported CSV, without newline."""
        return ", ".join(str(value) for value in astuple(self))

    def describe(self, indent: str = "") -> str:
        """Return a labelled, multi-line description of the record."""
        return "\n".join(
            f"{indent}{label}: {value}"
            for label, value in zip(LABELS, astuple(self))
        )