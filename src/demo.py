import numpy as np

from matrix import InvalidArgument, multiply, print_matrix
from transform import (apply, point, translation, scale, scale_about_point,
                       reflect_x, reflect_y, reflect_z, reflect_origin)

SAMPLE_POINT = (40, 30, 0)

def integer_example():
    A1 = [[1, 2],
          [3, 4],
          [5, 6]]
    B1 = [[7, 8, 9],
          [10, 11, 12]]

    print("=== Integer Matrix Multiplication ===")
    print_matrix(A1, "Matrix A1 (3x2)")
    print_matrix(B1, "Matrix B1 (2x3)")
    result = multiply(A1, B1)
    print_matrix(result, "Result A1 * B1 (3x3)")
    return result

def double_example():
    A2 = [[1.5, 2.5, 3.5],
          [4.5, 5.5, 6.5]]
    B2 = [[1.1, 2.1],
          [3.1, 4.1],
          [5.1, 6.1]]

    print("=== Double Matrix Multiplication ===")
    print_matrix(A2, "Matrix A2 (2x3)")
    print_matrix(B2, "Matrix B2 (3x2)")
    result = multiply(A2, B2)
    print_matrix(result, "Result A2 * B2 (2x2)")
    return result

def error_example():
    A3 = [[1, 2, 3],
          [4, 5, 6]]
    B3 = [[1, 2],
          [3, 4]]

    print("=== Error Handling Example ===")
    print("Attempting to multiply incompatible matrices:")
    print_matrix(A3, "Matrix A3 (2x3)")
    print_matrix(B3, "Matrix B3 (2x2)")
    return multiply(A3, B3)

def float_example():
    A4 = np.array([[1.0, 2.0],
                   [3.0, 4.0]], dtype=np.float32)
    B4 = np.array([[5.0, 6.0],
                   [7.0, 8.0]], dtype=np.float32)

    print("=== Float Matrix Multiplication (Square Matrices) ===")
    print_matrix(A4, "Matrix A4 (2x2)")
    print_matrix(B4, "Matrix B4 (2x2)")
    result = multiply(A4, B4)
    print_matrix(result, "Result A4 * B4 (2x2)")
    return result

def transform_example(p=SAMPLE_POINT):
    x, y, z = p
    print(f"=== Transforms of point ({x}, {y}, {z}) ===")
    print_matrix(point(x, y, z), "Point")

    transforms = [
        ("translation(10, -5, 2)", translation(10, -5, 2)),
        ("scale(2, 2, 2)", scale(2)),
        ("scale_about_point(2, 2, 2, 40, 30, 0)", scale_about_point(2, 2, 2, 40, 30, 0)),
        ("reflect_x()", reflect_x()),
        ("reflect_y()", reflect_y()),
        ("reflect_z()", reflect_z()),
        ("reflect_origin()", reflect_origin()),
    ]
    results = {}
    for name, M in transforms:
        q = apply(M, p)
        results[name] = q
        print_matrix([[c] for c in q], name)
    return results

def main():
    # cada exemplo e independente, um erro nao impede os seguintes
    for example in (integer_example, double_example, error_example):
        try:
            example()
        except InvalidArgument as e:
            print(f"Error: {e}\n")

    try:
        float_example()
    except InvalidArgument as e:
        print(f"Error: {e}")

    transform_example()
    return 0

if __name__ == "__main__":
    main()
