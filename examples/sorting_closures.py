"""Example: one sort, three ways of writing the ordering predicate."""

import operator

from closure_playground import NAMES, backwards, sort_with


def main() -> None:
    names = list(NAMES)
    print(sort_with(names, lambda s1, s2: s1 > s2))
    print(sort_with(names, backwards))
    print(sort_with(names, operator.gt))
    print("unchanged", names)


if __name__ == "__main__":
    main()
