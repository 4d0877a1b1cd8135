"""Example: counters that share a captured running total."""

from closure_playground import captured_total, make_incrementer


def main() -> None:
    increment_by_ten = make_incrementer(10)
    print("ten", increment_by_ten(), increment_by_ten(), increment_by_ten())

    increment_by_five = make_incrementer(5)
    print("five", increment_by_five(), increment_by_five())

    print("ten", increment_by_ten())

    # Same function object, same cell.
    also_increment_by_ten = increment_by_ten
    print("alias", also_increment_by_ten(), captured_total(increment_by_ten))


if __name__ == "__main__":
    main()
