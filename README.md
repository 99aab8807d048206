# dsakit

A small collection of classic data structures in plain Python, with no
dependencies beyond the standard library.

## What is inside

- `dsakit.sortedset`
  - `SortedIntSet`: a set of integers kept in ascending order by binary
    search. `insert`, `delete`, `union`, `intersection`, `difference` and
    `symmetric_difference` change the set in place and return its new size;
    `belongs_to` (also `in`) tests membership. `str()` gives the values
    comma separated.
  - `SetSession`: holds numbered sets and runs opcode commands through
    `execute(op, b, c)` or `run(tokens)`, which yields one output line per
    command.
  - `main()`: the `dsakit-sets` command (see below).
- `dsakit.linkedlist`: `LinkedList`, a doubly linked list bounded by sentinel
  `Node`s, with `insert` (append), `delete_tail`, `len()`, iteration and
  `reversed()`.
- `dsakit.stacks`: three integer stacks sharing one interface: `push`,
  `pop`, `get_element_from_top`, `get_element_from_bottom`, `len()`, and
  `add`, `subtract`, `multiply`, `divide`, which replace the top two values
  with the result and return it.
  - `ArrayStack` holds at most 1024 values and has `print_stack(top)`.
  - `DynamicStack` has no limit; its `capacity` doubles when full and halves
    when it falls to half, never below 1024.
  - `ListStack` is backed by `LinkedList` and has `print_stack(top)`.

  Overflow, underflow, bad indices, too few operands and division by zero
  raise `StackError`. `divide` truncates toward zero and then subtracts one
  when the quotient is not positive (for `ArrayStack` and `DynamicStack`,
  only when the dividend is non-zero). `ListStack.divide` pops both operands
  before checking for zero.
- `dsakit.accounts`: `Account` and the abstract `AccountStore`, with two
  stores: `Chaining` (separate chaining) and `LinearProbing` (open
  addressing with tombstones). Every store offers `create_account`,
  `get_balance` (-1 for an unknown id), `add_transaction` (opens the account
  if it does not exist), `does_exist`, `delete_account`, `database_size`,
  `get_top_k` (largest balances first) and `hash`.
- `dsakit.probing`: `QuadraticProbing`, `CubicProbing` and `Comp`, the same
  interface on tables probed at `h + k**2` and `h + k**3`.
- `dsakit.unlimitedint`: `UnlimitedInt`, a signed integer of any size, built
  from a decimal string, an `int` or another `UnlimitedInt`. Static `add`,
  `sub`, `mul`, `div` (floor division) and `mod`, plus the usual operators,
  comparisons, `is_zero()`, `sign`, `digits` and `len()` (digit count).
- `dsakit.rational`: `gcd(p, q)` and `UnlimitedRational`, a fraction kept in
  lowest terms with static `add`, `sub`, `mul`, `div` and the `+ - * /`
  operators; `str()` gives `"p/q"`. A negative denominator keeps its sign;
  a zero denominator raises `ZeroDivisionError`.
- `dsakit.symtable`: `SymbolTable`, an unbalanced binary search tree of
  `SymEntry` nodes with `insert`, `remove`, `search` (both raise `KeyError`
  for a missing name), `len()` and `in`. Inserting an existing name adds a
  second entry rather than replacing the first.
- `dsakit.exprtree`: `NodeType`, `ExprTreeNode` (with
  `ExprTreeNode.from_token`) and `is_integer_token`.
- `dsakit.evaluator`: `tokenize`, `build_tree`, `evaluate` and `Evaluator`,
  which parses statements such as `x := ((3 + 4) * 2)`. Expressions must be
  a single operand or fully parenthesised; values are exact rationals.

## Install

    pip install .

## Set commands from the terminal

    dsakit-sets < commands.txt

The command reads whitespace-separated integers from standard input. Each
command is an opcode followed by its arguments, and prints one line:

| op | arguments | output                                          |
|----|-----------|-------------------------------------------------|
| 1  | set value | insert; new size                                |
| 2  | set value | delete; new size, or -1 if the set is missing   |
| 3  | set value | membership 1 or 0, or -1 if the set is missing  |
| 4  | a b       | union into a; new size                          |
| 5  | a b       | intersection into a; new size                   |
| 6  | set       | size                                            |
| 7  | a b       | difference into a; new size                     |
| 8  | a b       | symmetric difference into a; new size           |
| 9  | set       | the set, comma separated (empty if missing)     |

Sets are numbered from 0. A command that refers to the next unused number
creates that set first.

## Using the library

    from dsakit.stacks import ArrayStack
    from dsakit.evaluator import Evaluator, tokenize

    stack = ArrayStack()
    stack.push(7)
    stack.push(2)
    stack.divide()          # 3

    evaluator = Evaluator()
    evaluator.parse(tokenize("x := (1 / 3)"))
    evaluator.eval()
    str(evaluator.symtable.search("x"))   # "1/3"

## What it does not do

The account stores and the symbol table live in memory only; nothing is
saved to disk. The tables have a fixed number of slots and are never
resized, and a full probing table raises `OverflowError`. The evaluator has
no command of its own: statements are fed to it from Python.

## Tests

    pip install .[test]
    pytest