class ArgTypeError(TypeError):
    def __init__(self, arg_name, expected, given):
        super().__init__(
            f"Expected `{arg_name}` to be {expected}, given "
            f"{type(given)}: {repr(given)}"
        )
        self.arg_name = arg_name
        self.expected = expected
        self.given = given
