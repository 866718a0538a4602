import pytest

from blc.diagnostics import ParseError
from blc.lexer import END_OF_INPUT, TokenStream
from blc.parser import Parser
from blc.printer import tree
from blc.statement import Condition, Kind, Statement


def parse(code):
    tokens = TokenStream.from_source(code)
    s = Statement()
    s.parse(tokens)
    return s, tokens


def parse_block(code):
    tokens = TokenStream.from_source(code)
    s = Statement()
    s.parse_block(tokens)
    return s, tokens


def test_parse_call_consumes_one_token():
    s, tokens = parse("move skip")
    assert s.kind == Kind.CALL
    assert tree(s) == "(CALL move)"
    assert tokens.front().value == 'skip'


def test_parse_if():
    s, tokens = parse("IF next-is-enemy THEN infect END IF move")
    assert tree(s) == "(IF next-is-enemy (BLOCK (CALL infect)))"
    assert tokens.front().value == 'move'


def test_parse_if_else():
    s, tokens = parse("IF random THEN turnleft ELSE turnright move END IF")
    assert s.kind == Kind.IF_ELSE
    assert tree(s) == "(IF_ELSE random (BLOCK (CALL turnleft)) (BLOCK (CALL turnright) (CALL move)))"
    assert tokens.front().value == END_OF_INPUT


def test_parse_while():
    s, _ = parse("WHILE next-is-empty DO move END WHILE")
    body = Statement()
    assert s.disassemble_while(body) == Condition.NEXT_IS_EMPTY
    assert tree(body) == "(BLOCK (CALL move))"


def test_parse_empty_bodies():
    s, _ = parse("IF true THEN ELSE END IF")
    assert tree(s) == "(IF_ELSE true (BLOCK) (BLOCK))"


def test_parse_nested():
    code = """
    WHILE true DO
      IF next-is-wall THEN
        turnleft
      ELSE
        WHILE next-is-empty DO move END WHILE
      END IF
      skip
    END WHILE
    """
    s, tokens = parse(code)
    assert tree(s) == ("(WHILE true (BLOCK (IF_ELSE next-is-wall (BLOCK (CALL turnleft)) "
                       "(BLOCK (WHILE next-is-empty (BLOCK (CALL move))))) (CALL skip)))")
    assert tokens.length() == 1


def test_parse_replaces_previous_content():
    tokens = TokenStream.from_source("skip")
    s = Statement()
    s.assemble_while(Condition.TRUE, Statement())
    s.parse(tokens)
    assert tree(s) == "(CALL skip)"


def test_parse_block_reads_until_end_of_input():
    s, tokens = parse_block("move turnleft IF true THEN infect END IF")
    assert s.length_of_block() == 3
    assert tokens.front().value == END_OF_INPUT


@pytest.mark.parametrize("stop", ["ELSE", "END"])
def test_parse_block_stops_before_else_and_end(stop):
    s, tokens = parse_block(f"move skip {stop} move")
    assert tree(s) == "(BLOCK (CALL move) (CALL skip))"
    assert tokens.front().value == stop


def test_parse_block_of_nothing():
    s, _ = parse_block("")
    assert s == Statement()


def test_deep_nesting():
    depth = 60
    code = "WHILE true DO " * depth + "move" + " END WHILE" * depth
    s, tokens = parse(code)
    assert s.kind == Kind.WHILE
    assert tokens.length() == 1


def test_parser_accepts_plain_token_strings():
    parser = Parser(['IF', 'true', 'THEN', 'move', 'END', 'IF'])
    s = Statement()
    parser.parse_statement(s)
    assert tree(s) == "(IF true (BLOCK (CALL move)))"
    assert parser.at_end()


@pytest.mark.parametrize("code, code_id, message", [
    ("END", "E002", "Invalid Identifier"),
    ("THEN", "E002", "Invalid Identifier"),
    ("next-is-wall", "E002", "Invalid Identifier"),
    ("%", "E002", "Invalid Identifier"),
    ("", "E002", "Invalid Identifier"),
    ("IF nowhere THEN move END IF", "E003", "Invalid Condition"),
    ("IF true move END IF", "E001", "keyword THEN not present"),
    ("IF true THEN move", "E001", "keyword END not present"),
    ("IF true THEN move END WHILE", "E001", "keyword IF not present"),
    ("IF true THEN move ELSE skip END", "E001", "keyword IF not present"),
    ("WHILE move DO skip END WHILE", "E003", "Invalid Condition"),
    ("WHILE true skip END WHILE", "E001", "keyword DO not present"),
    ("WHILE true DO skip END IF", "E001", "keyword WHILE not present"),
    ("WHILE true DO skip ELSE move END WHILE", "E001", "keyword END not present"),
    ("IF true THEN IF random THEN move END IF", "E001", "keyword END not present"),
])
def test_parse_errors(code, code_id, message):
    with pytest.raises(ParseError) as exc:
        parse(code)
    assert exc.value.code == code_id
    assert exc.value.message == message


def test_parse_error_reports_position():
    with pytest.raises(ParseError) as exc:
        parse("IF true THEN\n  move\nEND WHILE")
    assert exc.value.line == 3
    assert exc.value.column == 4
    assert exc.value.token.value == 'WHILE'
    assert isinstance(exc.value, SyntaxError)


def test_missing_end_if_does_not_swallow_trailing_statements():
    # Without END IF the following statements are part of the then-branch and
    # the construct still fails when the enclosing END arrives unpaired.
    with pytest.raises(ParseError) as exc:
        parse_block("IF next-is-wall THEN turnleft move END")
    assert exc.value.message == "keyword IF not present"
