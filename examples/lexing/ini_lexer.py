"""A tiny INI tokenizer built only from scanning primitives.

Shows how the primitives compose into a hand-written lexer: each rule is a
scanner, and a rule "fires" when it returns a different cursor.
"""

from cursorscan import (
    bind,
    bounds,
    scan,
    scan_if,
    scan_while_excluding,
    span,
)

SOURCE = """\
; settings for the demo
[server]
host = example.org
port = 8080

[client]
retries = 3
"""

newline = bind(scan, "\n")


def skip_blanks(first, last):
    while True:
        stop = scan_if(first, last, str.isspace)
        if stop == first:
            return first
        first = stop


def tokenize(source: str):
    first, last = bounds(source)
    while True:
        first = skip_blanks(first, last)
        if first == last:
            return

        if (body := scan(first, last, ";")) != first:
            stop = scan_while_excluding(body, last, newline)
            yield "comment", span(body, stop).strip()
        elif (body := scan(first, last, "[")) != first:
            stop = scan_while_excluding(body, last, bind(scan, "]"))
            yield "section", span(body, stop)
            stop = scan(stop, last, "]")
        else:
            eq = scan_while_excluding(first, last, bind(scan, "="))
            stop = scan_while_excluding(eq, last, newline)
            yield "key", span(first, eq).strip()
            yield "value", span(scan(eq, last, "="), stop).strip()
        first = stop


if __name__ == "__main__":
    for kind, text in tokenize(SOURCE):
        print(f"{kind:8} {text!r}")
