# densealg

Small dense vectors and matrices of floats. The package has no dependencies.

## Installation

```
pip install densealg
```

## Vectors

```python
from densealg.vector import Vector, DimensionError

a = Vector([1.0, 2.0, 3.0])
b = Vector.zeros(3)
b[1] = 4.0

a + b          # element-wise; a scalar on the right also works: a * 2.0
a.dot(b)       # 8.0
str(a)         # "[ 1.00000, 2.00000, 3.00000]"
```

`Vector` supports `+`, `-`, `*` and `/` with another vector of the same
length or with a scalar on the right. Each operation returns a new vector.
Vectors of different lengths raise `DimensionError`, which is a subclass of
`ValueError`. Division by zero does not raise. It follows IEEE rules and
gives `inf`, `-inf` or `nan`.

Vectors compare with `==` and `!=` element by element. `<`, `<=`, `>` and
`>=` compare lexicographically, so a shorter vector that is a prefix of a
longer one is the smaller. Vectors are mutable and cannot be hashed.

Other members:

- `Vector.from_scalar(x)` builds a one-element vector.
- `copy()` makes an independent copy.
- `len()`, iteration and integer indexing work as for a list.
- `write(stream)` writes the formatted vector to a text stream. Each entry is
  formatted as `%8.5f`.

A vector holds at most `MAX_DIM - 1` entries, where
`densealg.vector.MAX_DIM` is 2**20. Larger vectors raise `DimensionError`.

## Matrices

```python
from densealg.matrix import Matrix
from densealg.vector import Vector

m = Matrix([[1.0, 2.0], [3.0, 4.0]])
m.shape                         # (2, 2)
m[0, 1]                         # 2.0
m[1]                            # the second row, as a Vector
m @ Matrix.zeros(2, 3)          # matrix product, same as m.dot(...)
m @ Vector([1.0, 1.0])          # Vector([3.0, 7.0])
m + Vector([10.0, 20.0])        # the vector's i-th entry is applied to row i
m * 2.0                         # a scalar applies to every entry
```

`Matrix` supports element-wise `+`, `-`, `*` and `/` with any of these right
operands:

- a matrix of the same shape;
- a vector whose length equals the number of rows;
- a scalar.

A mismatched shape raises `DimensionError`.

`dot` and `@` give the matrix product. The left operand's column count must
match the right operand's row count, or the length of a vector on the right,
in which case the result is a vector.

Other members:

- `Matrix.zeros(rows, cols)` builds a matrix of zeros.
- `Matrix.from_scalar` builds a 1×1 matrix.
- `Matrix.from_vector` builds a column matrix.
- `rows`, `cols` and `shape` are properties.
- Iterating yields the row vectors.
- `m[i, j] = x` sets an entry.
- `m[i] = [...]` replaces a row, which must have the same number of columns.
- `copy()` makes an independent copy.
- `write(stream)` writes the rows one per line.

Rows of differing lengths raise `DimensionError`. So does a matrix with
`MAX_DIM` or more entries.

## Limitations

This is a small arithmetic toolkit and nothing more:

- There is no command-line tool.
- There are no transpose, inverse, determinant or decomposition routines.
- Matrices do not compare by value: `==` on two `Matrix` objects tests
  identity. Compare rows or entries instead.