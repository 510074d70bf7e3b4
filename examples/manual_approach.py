import logging

from flagparse import (
    Bool,
    Flag,
    FlagSet,
    Float,
    IntList,
    String,
    StringList,
    setup_logging,
)

setup_logging(console_log_level=logging.DEBUG)

salary = Float()
full_name = String()
salute = String("Mr.")
emp_id = IntList([100])
is_intern = Bool()
tags = StringList()

flag_set = FlagSet(description="CLI for managing employee database")
flag_set.add(Flag.positional_flag(salary, "Employee salary"), "salary")
flag_set.add(Flag.positional_flag(full_name, "Full name of the employee"), "full-name")
flag_set.add(Flag.optional_flag(salute, "Salutation for the employee"), "--salute")
flag_set.add(Flag.switch_flag(is_intern, "Is the new employee an intern"), "--is-intern")

emp_id_flag = Flag.optional_flag(emp_id, "Employee ID for new employee")
emp_id_flag.set_nargs(3)
flag_set.add(emp_id_flag, "--emp-id")

tags_flag = Flag.optional_flag(tags, "Free form tags, consumes the rest of the line")
tags_flag.set_nargs(-1)
flag_set.add(tags_flag, "--tags", "-t")

if __name__ == "__main__":
    flag_set.parse()
    print(
        f"{salute.get()} {full_name.get()} earns {salary}, intern: {is_intern} "
        f"(id: {emp_id}, tags: {tags})"
    )
