# registro_autos

This is a small console application for keeping a register of vehicles. The
records live in a binary file of fixed-size records, `<name>.bin`. After you
add or change a vehicle, the program rewrites the CSV file `<name>.csv` from
that binary file, so you can open it in any spreadsheet program.

## Installation

```
pip install .
```

The package needs no third-party libraries.

## Usage

To start the interactive menu, run:

```
registro-autos
```

The command takes no arguments apart from `--help`. The menu and its prompts
are in Spanish. It offers these options:

1. **Crear Archivo Nuevo** creates a new pair of files, `<name>.bin` and
   `<name>.csv`. The binary file starts empty. The CSV file holds only its
   header line.
2. **Usar archivo viejo** selects an existing pair of files. It reports
   whether both files exist.
3. **Agregar registro del carro** asks for every field of a vehicle:
   - make
   - sub-make
   - model year
   - plates
   - colour
   - serial number
   - entry date
   - exit date

   It appends the vehicle to the binary file and rewrites the CSV file. If the
   model year does not start with a number, it is stored as 0.
4. **Mostrar registros del carro** lists every vehicle in the binary file.
5. **Modificar registro del carro** asks for a plate and shows the first
   vehicle with that plate. It then lets you change that vehicle's colour,
   entry date or exit date, and rewrites the CSV file.
6. **Eliminar archivo del carro** deletes a pair of files, if both exist.
7. **Salir** quits the program.

Some rules apply to names and fields:

- Give every name without an extension. The program adds `.bin` and `.csv`.
- Options 3 to 5 work on the name chosen most recently with option 1, 2 or 6.
  Choose a name before you use them.
- One session can add at most 50 vehicles.
- Each text field you type is cut to 49 characters. In the binary file, each
  text field is stored as at most 49 bytes of UTF-8.

## Using it as a library

You can call the storage functions directly:

```python
from registro_autos.carro import Carro
from registro_autos.storage import (
    EditableField,
    append_record,
    create_files,
    export_csv,
    find_record,
    modify_record,
    read_records,
)

create_files("garage")
append_record("garage", Carro(marca="Marca", submarca="Modelo", modelo=2020,
                              placas="ABC-000", color="Rojo",
                              num_serie="SERIE-0000", fecha_in="01/01/2024",
                              fecha_out="02/01/2024"))
modify_record("garage", "ABC-000", EditableField.COLOR, "Azul")
export_csv("garage")
print(read_records("garage"))
print(find_record("garage", "ABC-000"))
```

### `registro_autos.carro`

- `Carro` is a dataclass with these fields: `marca`, `submarca`, `modelo`,
  `placas`, `color`, `num_serie`, `fecha_in` and `fecha_out`.
- `Carro.pack()` returns the record as a fixed-size binary block of
  `RECORD_SIZE` bytes.
- `Carro.unpack(data)` builds a record from such a block.
- `Carro.csv_row()` returns the record as one line of the exported CSV.
- `Carro.describe(indent)` returns a labelled description that spans several
  lines.

### `registro_autos.storage`

- `bin_path` and `csv_path` return the path of each file for a base name.
- `create_files` creates a new pair of files.
- `files_exist` tells whether both files of a base name exist.
- `delete_files` removes both files.
- `append_record` adds a record to the end of the binary file.
- `read_records` returns every complete record in the binary file.
- `find_record` returns the first record with the given plates, or `None`.
- `modify_record(base, placas, field, value)` changes one field of the first
  record with those plates and writes it back in place.
  - `field` is an `EditableField` member: `COLOR`, `FECHA_IN` or `FECHA_OUT`.
  - It raises `KeyError` when no record has those plates.
- `export_csv` rewrites the CSV file from the binary file.

## What it does not do

- You cannot delete a single vehicle. Option 6 deletes the whole pair of
  files.
- Only the colour, entry date and exit date can be changed once a vehicle is
  stored.
- The program does not check dates or plates. It stores them as typed.

## Running the tests

```
pip install .[test]
pytest
```