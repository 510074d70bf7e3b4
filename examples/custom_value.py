from flagparse import Flag, FlagSet, Value


class Celsius(Value[float]):
    """Temperature given as e.g. `21.5C` or `70F`."""

    type_name = "temperature"

    def __init__(self, degrees: float = 0.0) -> None:
        self.degrees = degrees

    def set(self, *tokens: str) -> None:
        if not tokens:
            return
        token = tokens[0].upper()
        if token.endswith("F"):
            self.degrees = (float(token[:-1]) - 32) * 5 / 9
        else:
            self.degrees = float(token.removesuffix("C"))

    def get(self) -> float:
        return self.degrees

    def __str__(self) -> str:
        return f"{self.degrees:.1f}C"


if __name__ == "__main__":
    target = Celsius(20.0)
    flag_set = FlagSet(description="Set the thermostat")
    flag_set.add(Flag.optional_flag(target, "Target temperature"), "--target", "-t")
    flag_set.parse()
    print(f"Heating to {target}")
