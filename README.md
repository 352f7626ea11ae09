# matscript

A small interpreter for scripts of integer matrices. Each line of a script
gives a single-letter matrix a value. The value is either a literal
definition or an expression over matrices defined on earlier lines.

## Script format

```
A = 2 3 [1 2 3 ; 4 5 6 ; ]
B = 3 2 [1 0 ; 0 1 ; 1 1 ; ]
C = A * B + (B' * A')'
```

- Each non-blank line has the form `X = right-hand side`, where `X` is a
  single character naming the matrix.
- A right-hand side that starts with a digit is a literal: the number of
  rows and columns, then the values in row-major order inside `[ ... ]`.
  Rows are usually separated by `;`; the separators are not checked, only
  the first rows × columns integers are used.
- Any other right-hand side is an expression over upper-case names
  `A`–`Z`. It may use `+` (element-wise addition), `*` (matrix product),
  the postfix `'` (transpose) and parentheses. `*` binds tighter than `+`,
  and `'` applies to the operand or parenthesised group just before it.
  Other characters in an expression are ignored.
- Blank lines are ignored. The matrix assigned on the last line is the
  result.
- Once a name is defined, later lines that assign the same name again do
  not replace it for lookups by later expressions; only the last line's
  matrix is returned.

## Command line

```
matscript script.txt
```

This prints the resulting matrix on one line: the row count, the column
count, then the values in row-major order. For the script above it prints
`2 2 8 6 20 22`.

If the file cannot be read, an expression names an undefined matrix, the
shapes of the operands do not fit, a literal is malformed, or the script
defines no matrix at all, a message is written to standard error and the
command exits with status 1.

## Library use

```python
from matscript.matrix import Matrix, parse_matrix
from matscript.tree import MatrixTree
from matscript.expr import infix_to_postfix, evaluate_expr
from matscript.script import execute_script

a = parse_matrix("A", "2 2 [1 2 ; 3 4 ; ]")
b = parse_matrix("B", "2 2 [5 6 ; 7 8 ; ]")

print((a + b).format())          # 2 2 6 8 10 12
print((a @ b).format())          # 2 2 19 22 43 50
print(a.transpose().format())    # 2 2 1 3 2 4

tree = MatrixTree([a, b])
print(infix_to_postfix("(A+B)*A'"))   # AB+A'*
result = evaluate_expr("R", "(A + B) * A'", tree)
print(result.name, result.format())

final = execute_script("script.txt")
if final is not None:
    print(final.format())
```

- `Matrix(num_rows, num_cols, values, name="!")` is an immutable matrix
  with its values in row-major order. It offers `shape`, `rows()`,
  `columns()`, `+`, `@`, `transpose()`, `renamed(name)` and `format()`.
  Results of `+`, `@` and `transpose()` carry the temporary name `"!"`.
  Mismatched shapes raise `ValueError`.
- `parse_matrix(name, expr)` raises `ValueError` when the dimensions or the
  opening `[` are missing or there are too few values.
- `MatrixTree` keeps named matrices ordered by name. `insert` returns
  `False` and leaves the tree unchanged when the name is already present;
  `find` returns `None` for an unknown name. The tree supports `in`,
  `len()` and iteration in name order.
- `evaluate_expr` raises `KeyError` for an undefined name and `ValueError`
  for an empty expression or an operator without enough operands.
- `execute_script` returns `None` for a script with no assignments.

## Limitations

Matrices live only in memory for the length of one script run; there is
no interactive prompt and no way to save or load named matrices between
runs. Expressions only reference upper-case single-letter names.

## Tests

```
pip install -e ".[test]"
pytest
```