"""Step over elements that do not match with scan_not and scan_if_not."""

from cursorscan import bounds, scan_if_not, scan_not

source = "Talk is cheap. Show me the code. -- Linus Torvalds"

first, last = bounds(source)

first = scan_not(first, last, "Q")
print("Single element:", first.read())

# Moves one element, not past the partial "alk" prefix
first = scan_not(first, last, pattern="alks")
print("Range of elements:", first.read())

first = scan_if_not(first, last, lambda c: c == "f")
print("Predicate:", first.read())
