"""
Basic usage of the distance evaluator.
"""

from decimal import Decimal

from disteval import DistanceEvaluator, Matrix, InvalidOperandError, list_metrics


def main():
    a = [1, 2, 3]
    b = [4, 6, 8]

    print("Vector distances")
    for metric in list_metrics():
        evaluator = DistanceEvaluator({"type": metric})
        print(f"  {metric:>12}: {evaluator.evaluate([a, b]):.4f}")

    # Exact decimals are accepted as-is
    evaluator = DistanceEvaluator()
    decimals = [[Decimal("0"), Decimal("3")], [Decimal("4"), Decimal("0")]]
    print(f"\nEuclidean over decimals: {evaluator.evaluate(decimals)}")

    # Each column is one point
    observations = Matrix(
        [
            [1.0, 2.0, 8.0],
            [1.5, 2.5, 7.0],
            [0.5, 2.0, 9.0],
        ],
        column_labels=["north", "south", "east"],
    )
    distances = DistanceEvaluator({"type": "manhattan"}).evaluate([observations])

    print("\nPairwise manhattan distances between columns")
    print("        " + "".join(f"{label:>8}" for label in distances.column_labels))
    for label, row in zip(distances.row_labels, distances.to_list()):
        print(f"{label:>8}" + "".join(f"{value:8.2f}" for value in row))

    try:
        evaluator.evaluate([a, None])
    except InvalidOperandError as e:
        print(f"\nRejected: {e}")


if __name__ == "__main__":
    main()
