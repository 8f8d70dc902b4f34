import numpy as np


class InvalidArgument(ValueError):
    """Matrizes vazias, de dimensoes incompativeis ou com linhas irregulares."""


class Matrix:
    """Grelha retangular de numeros guardada linha a linha.

    As linhas sao copiadas na construcao (nunca partilha as listas de quem
    chama). A forma vem da primeira linha; a validacao fica em multiply().
    """

    # numpy delega em __rmatmul__ em vez de converter a Matrix num array
    __array_ufunc__ = None

    def __init__(self, rows):
        self._data = [list(r) for r in rows]

    @property
    def rows(self):
        return len(self._data)

    @property
    def cols(self):
        return len(self._data[0]) if self._data else 0

    @property
    def shape(self):
        return self.rows, self.cols

    def __len__(self):
        return len(self._data)

    def __getitem__(self, i):
        return self._data[i]

    def __iter__(self):
        return iter(self._data)

    def __eq__(self, other):
        if isinstance(other, Matrix):
            other = other._data
        elif isinstance(other, np.ndarray):
            other = other.tolist()
        try:
            return len(self._data) == len(other) and all(
                list(a) == list(b) for a, b in zip(self._data, other))
        except TypeError:
            return NotImplemented

    def __repr__(self):
        return f"Matrix({self._data!r})"

    def __matmul__(self, other):
        return multiply(self, other)

    def __rmatmul__(self, other):
        return multiply(other, self)

    def tolist(self):
        return [list(r) for r in self._data]

    def to_array(self, dtype=np.float32):
        return np.array(self._data, dtype=dtype)


def identity(n):
    """Identidade n x n (inteiros)."""
    return Matrix([[1 if i == j else 0 for j in range(n)] for i in range(n)])


def multiply(A, B):
    """Produto A * B.

    A e B podem ser Matrix, sequencias de linhas ou arrays numpy 2-D. Todas as
    verificacoes correm antes de alocar o resultado; se alguma falhar levanta
    InvalidArgument. Cada celula comeca no zero do tipo dos elementos (ints
    continuam ints, floats continuam floats).
    """
    if len(A) == 0 or len(B) == 0 or len(A[0]) == 0 or len(B[0]) == 0:
        raise InvalidArgument("Matrices cannot be empty")

    rows_a, cols_a = len(A), len(A[0])
    rows_b, cols_b = len(B), len(B[0])

    if cols_a != rows_b:
        raise InvalidArgument(
            "Matrix multiplication not possible: columns of first matrix "
            f"({cols_a}) must equal rows of second matrix ({rows_b})")

    for row in A:
        if len(row) != cols_a:
            raise InvalidArgument("First matrix has inconsistent row sizes")
    for row in B:
        if len(row) != cols_b:
            raise InvalidArgument("Second matrix has inconsistent row sizes")

    zero = type(A[0][0] * B[0][0])()
    result = [[zero] * cols_b for _ in range(rows_a)]

    for i in range(rows_a):
        for j in range(cols_b):
            for k in range(cols_a):
                result[i][j] += A[i][k] * B[k][j]

    return Matrix(result)


def _format_element(value, width, precision):
    if isinstance(value, (int, np.integer)):
        return f"{value:>{width}d}"
    try:
        return f"{value:>{width}.{precision}g}"
    except TypeError:
        # Fraction so aceita "g" a partir do Python 3.12
        return f"{float(value):>{width}.{precision}g}"


def print_matrix(matrix, name, width=8, precision=2, file=None):
    print(f"{name}:", file=file)
    for row in matrix:
        line = "".join(_format_element(v, width, precision) + " " for v in row)
        print(line, file=file)
    print(file=file)
