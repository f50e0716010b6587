from cs_order.cli.common.parse_args import InputModifiers


def dict_to_modifiers(options):
    """
    Build modifiers the way getopt gives them, True stands for a flag
    """
    return InputModifiers(
        {
            f"--{name}": "" if value is True else value
            for name, value in options.items()
            if value is not False
        }
    )
