"""Advance through a quote with scan and scan_if."""

from cursorscan import bounds, scan, scan_if

source = (
    "Programs must be written for people to read, "
    "and only incidentally for machines to execute. "
    "-- Harold Abelson"
)

first, last = bounds(source)

first = scan(first, last, "P")
print("Single element:", first.read())

first = scan(first, last, pattern="rograms m")
print("Range of elements:", first.read())

first = scan_if(first, last, lambda c: c == "u")
print("Predicate:", first.read())
