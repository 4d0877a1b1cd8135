"""Example: mapping numbers to digit names with a decorator-applied closure."""

from closure_playground import NUMBERS, DigitLookupError, map_digit_names, map_over, spell_digits


def main() -> None:
    @map_over(NUMBERS)
    def strings(number: int) -> str:
        return spell_digits(number)

    print(strings)
    print(map_digit_names([7, 90]))

    try:
        spell_digits(12, {1: "One"})
    except DigitLookupError as e:
        print("lookup failed", e.digit)


if __name__ == "__main__":
    main()
