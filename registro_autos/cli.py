"""Interactive menu for keeping the vehicle register."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass

from . import console, storage
from .carro import MAX_REGISTROS, Carro
from .storage import EditableField, RecordLimitError

MENU = "\n".join(
    (
        "<------------Menu------------>",
        "1. Crear Archivo Nuevo",
        "2. Usar archivo viejo",
        "3. Agregar registro del carro",
        "4. Mostrar registros del carro",
        "5. Modificar registro del carro",
        "6. Eliminar archivo del carro",
        "7. Salir",
    )
)

_FIELD_PROMPTS = {
    EditableField.COLOR: "Color: ",
    EditableField.FECHA_IN: "Fecha de Entrada (DD/MM/AAAA): ",
    EditableField.FECHA_OUT: "Fecha de Salida (DD/MM/AAAA): ",
}


def show_menu() -> int | None:
    """Print the menu and return the chosen option, or None if not a number."""
    print(MENU)
    return console.read_int("Ingrese opción:")


def prompt_carro() -> Carro:
    """Ask for every field of a new vehicle."""
    print("<------------Ingrese información del Vehículo------------>")
    marca = console.read_line("Marca: ")
    submarca = console.read_line("SubMarca: ")
    modelo = console.read_int("Modelo: ")
    return Carro(
        marca=marca,
        submarca=submarca,
        modelo=0 if modelo is None else modelo,
        placas=console.read_line("Placas: "),
        color=console.read_line("Color: "),
        num_serie=console.read_line("Número de serie: "),
        fecha_in=console.read_line("Fecha de Entrada (DD/MM/AAAA): "),
        fecha_out=console.read_line("Fecha de Salida (DD/MM/AAAA): "),
    )


@dataclass
class Session:
    """The file in use and the number of vehicles added so far."""

    base: str = ""
    count: int = 0

    def add_car(self) -> Carro:
        """Ask for a vehicle, store it and refresh the CSV file."""
        console.clear_screen()
        if self.count >= MAX_REGISTROS:
            raise RecordLimitError("Máximo de registros alcanzado")
        carro = prompt_carro()
        self.count += 1
        storage.append_record(self.base, carro)
        print(f"\nDatos guardados en el archivo binario {storage.bin_path(self.base)}.")
        storage.export_csv(self.base)
        print("Vehículo agregado exitosamente")
        input()
        return carro

    def modify(self) -> bool:
        """Change one field of a vehicle chosen by its plates."""
        placas = console.read_line("\nIngrese la placa del Vehículo a modificar: ")
        carro = storage.find_record(self.base, placas)
        if carro is None:
            print("No existe la placa ingresada")
            input()
            return False
        print(carro.describe())
        choice = console.read_int(
            "\n1.-Color \n2.-Fecha de entrada \n3.-Fecha de Salida "
            "\n¿Qué datos desea modificar? "
        )
        if choice in set(EditableField):
            field = EditableField(choice)
            value = console.read_line(_FIELD_PROMPTS[field])
            storage.modify_record(self.base, placas, field, value)
        print("Se modificó exitosamente")
        return True

    def show(self) -> None:
        """Print every stored vehicle."""
        records = storage.read_records(self.base)
        print("\n<------------ Registros de Vehículos ------------>")
        for carro in records:
            print(carro.describe("\t"))
            print("-" * 53)
        input()


def _run_option(session: Session, option: int | None) -> None:
    match option:
        case 1:
            session.base = console.read_line(
                "\nIngrese un nombre base para los archivos (sin extensión): "
            )
            binary, text = storage.create_files(session.base)
            print(f"Archivos '{binary}' y '{text}' creados exitosamente.")
            input()
        case 2:
            session.base = console.read_line(
                "\nIngrese el nombre base del archivo (sin extensión): "
            )
            if storage.files_exist(session.base):
                print("Archivos encontrados y listos para usar.")
            else:
                print("No se pudieron encontrar los archivos especificados.")
            console.pause()
        case 3:
            console.clear_screen()
            try:
                session.add_car()
            except RecordLimitError as exc:
                print(f"\n{exc}")
                input()
        case 4:
            console.clear_screen()
            session.show()
        case 5:
            console.clear_screen()
            if session.modify():
                storage.export_csv(session.base)
                print("Vehículo agregado exitosamente")
                input()
        case 6:
            console.clear_screen()
            session.base = console.read_line(
                "\nIngrese el archivo a eliminar (sin extensión): "
            )
            if not storage.files_exist(session.base):
                print("No se pudieron encontrar los archivos especificados.")
                console.pause()
                return
            try:
                binary, text = storage.delete_files(session.base)
                print(f"Archivos '{binary}' y '{text}' eliminados exitosamente.")
            except OSError as exc:
                print(f"Error al eliminar los archivos: {exc}")
            input()
        case _:
            print("\nOpción inválida")
            console.pause()


def main(argv: list[str] | None = None) -> int:
    """Run the interactive register until the user leaves."""
    argparse.ArgumentParser(
        prog="registro-autos", description="Registro de vehículos."
    ).parse_args(argv)
    session = Session()
    try:
        while True:
            console.clear_screen()
            option = show_menu()
            if option == 7:
                console.clear_screen()
                print("Saliendo del programa. ¡Hasta luego!")
                return 0
            _run_option(session, option)
    except EOFError:
        return 0
    except OSError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())