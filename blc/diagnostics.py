ERRORS = {
    "E001": ("Missing keyword", "BL constructs are closed by fixed keyword pairs (END IF, END WHILE, END name)."),
    "E002": ("Invalid Identifier", "Identifiers start with a letter and contain letters, digits and '-'; keywords and conditions are reserved."),
    "E003": ("Invalid Condition", "Use one of next-is-empty, next-is-wall, next-is-friend, next-is-enemy (or their -not- forms), random, true."),
    "E004": ("Keyword used as instruction name", "Keywords cannot name a user-defined instruction."),
    "E005": ("Condition used as instruction name", "Condition names cannot name a user-defined instruction."),
    "E006": ("Primitive redefined", "move, turnleft, turnright, infect and skip are built in and cannot be redefined."),
    "E007": ("Name mismatch", "The name after END must repeat the name given at the start."),
    "E008": ("Duplicate instruction", "Each INSTRUCTION must have a unique name."),
    "E009": ("Trailing content", "Nothing may follow the program's closing END name."),
}


class ParseError(SyntaxError):
    """A BL grammar violation. Parsing stops at the first one."""

    def __init__(self, code, message, token=None):
        self.code = code
        self.message = message
        self.token = token
        self.line = token.line if token is not None else 1
        self.column = token.column if token is not None else 0
        found = f" (found {token.value!r})" if token is not None else ""
        super().__init__(f"{message}{found} at line {self.line}")

    @property
    def title(self):
        return ERRORS.get(self.code, ("Error", "-"))[0]

    @property
    def tip(self):
        return ERRORS.get(self.code, ("Error", "-"))[1]


def _format_source_line(source_lines, line, col):
    """Format a source line with error pointer."""
    if line < 1 or line > len(source_lines):
        return ""
    source_line = source_lines[line - 1]
    pointer = ' ' * col + '^'
    return f">   {source_line}\n    {pointer}"


def format_error(err, source_code=None, filename=None):
    source_lines = source_code.split('\n') if source_code else []
    location_str = f"{filename or 'unknown'}:{err.line}:{err.column}"
    m = err.title
    if err.message != m:
        m += f" [{err.message}]"
    source_context = _format_source_line(source_lines, err.line, err.column)
    text = f"{location_str}: \033[91merror\033[0m: {m}\n"
    if source_context:
        text += f"{source_context}\n"
    return text + f"  \033[93mTip:\033[0m {err.tip}"
