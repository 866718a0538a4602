import sys
import os
import argparse
from .compiler import parse_source, parse_statements
from .diagnostics import ParseError, format_error
from .lexer import lex
from .printer import pretty_program, pretty_statement, tree


def main(argv=None):
    parser = argparse.ArgumentParser(description="BL parser (blc)")
    parser.add_argument("input", help="Source .bl file")
    parser.add_argument("-o", "--output", help="Write the pretty-printed result to this file")
    parser.add_argument("--statements", action="store_true", help="Input is a sequence of statements, not a program")
    parser.add_argument("--tokens", action="store_true", help="Print lexed tokens, one per line")
    parser.add_argument("--tree", action="store_true", help="Print parsed bodies as S-expressions")

    args = parser.parse_args(argv)

    input_file = args.input
    if not input_file.endswith('.bl'):
        print(f"Error: Expected a .bl file, got {input_file}")
        sys.exit(1)
    if not os.path.exists(input_file):
        print(f"Error: {input_file} not found")
        sys.exit(1)

    with open(input_file) as f:
        code = f.read()

    if args.tokens:
        for tok in lex(code):
            print(f"{tok.line}:{tok.column} {tok.type} {tok.value!r}")

    try:
        if args.statements:
            result = parse_statements(code)
        else:
            result = parse_source(code)
    except ParseError as e:
        print(format_error(e, source_code=code, filename=input_file), file=sys.stderr)
        print(f"\n\033[91mBL PARSER: parse of {input_file} failed\033[0m", file=sys.stderr)
        sys.exit(1)

    if args.tree:
        if args.statements:
            print(tree(result))
        else:
            for name in result.context:
                print(f"{name}: {tree(result.context[name])}")
            print(f"{result.name}: {tree(result.body)}")
        return

    if args.statements:
        text = pretty_statement(result)
    else:
        text = pretty_program(result)

    if args.output:
        with open(args.output, "w") as f:
            f.write(text)
        print(f"Success! Pretty-printed program written to: {args.output}")
    else:
        sys.stdout.write(text)

if __name__ == '__main__':
    main()
