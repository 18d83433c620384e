"""Record example: building multi-field values.

Parses ``<name> <age>`` records two ways: combine() with a plain
constructor, and applicative apply() over a curried one. Both grammars
produce the same values and the same diagnostics.
"""

from combiparse import ParseFailedError, char, run_or_fail, sep_by
from combiparse.grammars import parse_person, person, person_applicative

print("=" * 50)
print("Example 1: One Record")
print("=" * 50)

print(parse_person("Alexander 23"))
# Output: Person(name='Alexander', age=23)

print(run_or_fail(person_applicative(), "Ada 36"))
# Output: Person(name='Ada', age=36)

print("\n" + "=" * 50)
print("Example 2: Many Records")
print("=" * 50)

roster = sep_by(person(), char("\n"))
for entry in run_or_fail(roster, "Ada 36\nGrace 85\nAlan 41"):
    print(f"{entry.name:<8} {entry.age:>3}")

print("\n" + "=" * 50)
print("Example 3: Invalid Record")
print("=" * 50)

try:
    parse_person("Alexander twenty-three")
except ParseFailedError as e:
    print(e)
    # Output: digit: Unexpected 't' (at line 1, column 11)
