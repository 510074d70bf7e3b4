from dataclasses import dataclass, field

from flagparse import flag_field, parse_dataclass, setup_logging

setup_logging()


@dataclass
class Employee:
    salary: float = flag_field("positional,usage=Employee salary", default=0.0)
    full_name: str = flag_field("positional,usage=Full name of the employee", default="")
    salute: str = flag_field("usage=Salutation for the employee", default="Mr.")
    emp_id: list[int] = flag_field(
        "name=emp-id,usage=Employee ID\\, three numbers,nargs=3",
        default_factory=lambda: [100],
    )
    is_intern: bool = flag_field("name=is-intern:i,switch", default=False)
    notes: str = field(default="not a flag")


if __name__ == "__main__":
    employee = Employee()
    parse_dataclass(employee, description="CLI for managing employee database")
    print(employee)
