# hashoff

A small library for experimenting with hash tables of strings from the console.

## Modules

- `hashoff.hashing`: `HashFunction(num_slots, fn)` maps a string key to a slot
  in `range(num_slots)`. Ready-made hash functions are `random_hash(num_slots, seed=None)`,
  `consistent_random(num_slots)` (the same on every run), `zero(num_slots)`,
  `constant(num_slots, value)` and `identity(num_slots)`. `identity` reads the key as a
  decimal number, so `"137"` lands in slot 7 of a ten-slot table; keys that are not
  numbers hash to zero. `string_hash_code` and `tabulation_hash` are the building
  blocks of `random_hash`.
- `hashoff.chained`: `ChainedHashTable`, a separate-chaining set of strings with
  `insert`, `contains`, `remove`, `is_empty`, `len()` and `in`.
- `hashoff.interactive`: `ReplSession` runs one command line at a time against a
  table and returns the text it prints; `run_repl` shows `instructions(...)` and reads
  commands until `quit`. Commands are `insert`, `contains`, `remove`, `size`,
  `isEmpty` and `quit`. `i`, `c`, `r`, `s` and `q` work as short forms. `isEmpty` has no
  short form.
- `hashoff.prompts`: `make_selection_from`, `make_file_selection` and `get_yes_or_no`
  console prompts.
- `hashoff.menu`: `DemoRegistry` collects demos and orders them for a menu.
  `run_console` runs the main menu loop.
- `hashoff.memory`: `AllocationTracker` counts allocations and releases per type name
  and reports the ones that do not balance.

Functions that read or write the console take optional `read_line` and `write`
callables. They default to `input` and `sys.stdout.write`.

## Installing

```
pip install .
```

For the test suite:

```
pip install .[test]
pytest
```

## Using the library

```python
from hashoff.chained import ChainedHashTable
from hashoff.hashing import identity

table = ChainedHashTable(identity(10))
table.insert("137")      # True
table.insert("137")      # False, already present
"137" in table           # True
len(table)               # 1
table.remove("137")      # True
table.is_empty()         # True
```

Driving a table through the command interpreter:

```python
from hashoff.chained import ChainedHashTable
from hashoff.hashing import identity
from hashoff.interactive import ReplSession, run_repl

session = ReplSession(ChainedHashTable(identity(10)))
session.execute("insert 137")
# 'Attempted to add 137 to the table. Result: true\n'

run_repl("Chained Hashing", ChainedHashTable(identity(10)))  # reads from stdin
```

Building a console menu of demos:

```python
from hashoff.menu import DemoRegistry, run_console

registry = DemoRegistry("Hash table demos", menu_order=["demos.py"])
registry.register("demos.py", 1, "Interactive Chained Hashing",
                  lambda: run_repl("Chained Hashing", ChainedHashTable(identity(10))))
run_console(registry)
```

## What it does not do

- There is no installed command. You reach the menu and the interpreter by calling
  `run_console` or `run_repl` from Python.
- There is no timing or performance comparison of tables across load factors.
- There is no graphical window. There is no colored or styled output. Everything
  is plain text on the console.