ESCAPE = '\033[{}m'

RESET = 0
BOLD = 1
DEFAULT_TEXT = 39
DEFAULT_BACKGROUND = 49

BLACK = 30
LIGHT_CYAN = 96

BG_DARK_GRAY = 100
BG_LIGHT_GREEN = 102
BG_LIGHT_MAGENTA = 105
BG_LIGHT_CYAN = 106
BG_LIGHT_YELLOW = 103


# (background, text) per thing the debugger highlights
STYLES = {
    'current': (BG_LIGHT_CYAN, BLACK),
    'breakpoint': (BG_DARK_GRAY, DEFAULT_TEXT),
    'head0': (BG_LIGHT_MAGENTA, BLACK),
    'head1': (BG_LIGHT_YELLOW, BLACK),
    'both_heads': (BG_LIGHT_CYAN, BLACK),
    'modified': (BG_LIGHT_GREEN, BLACK),
}


def code(value):
    return ESCAPE.format(value)


def colored_text(color, text):
    return '{}{}{}'.format(code(color), text, code(DEFAULT_TEXT))


def colored_background(color, text):
    return '{}{}{}'.format(code(color), text, code(DEFAULT_BACKGROUND))


def bold_text(text):
    return '{}{}{}'.format(code(BOLD), text, code(RESET))


def styled(style, text, enabled=True):
    if not enabled:
        return str(text)
    background, color = STYLES[style]
    return colored_background(background, colored_text(color, text))
