INDENT_STEP = 2


def _pad(indent):
    # лишние закрывающие скобки уводят счётчик ниже нуля
    return " " * max(indent, 0)


def pretty_json(text):
    """
    Переформатирование JSON без разбора в дерево:
    - `{` / `[` → перевод строки и отступ +2 пробела;
    - `}` / `]` → на новой строке, отступ −2;
    - `,` → перевод строки, `:` → один пробел после;
    - внутри строковых литералов всё копируется как есть.

    Пробелы из входа сохраняются, поэтому повторный прогон добавит отступы ещё раз.
    На битом JSON не падает.
    """
    indent = 0
    in_quotes = False
    pretty = []
    last = ""

    for c in text:
        # NOTE: смотрим только на предыдущий выведенный символ, поэтому кавычка
        # после экранированного слэша (`\\"`) считается экранированной.
        # Известное ограничение, оставлено намеренно ради прежнего формата вывода.
        if c == '"' and last != "\\":
            in_quotes = not in_quotes
            chunk = c
        elif in_quotes:
            chunk = c
        elif c in "{[":
            indent += INDENT_STEP
            chunk = c + "\n" + _pad(indent)
        elif c in "}]":
            indent -= INDENT_STEP
            chunk = "\n" + _pad(indent) + c
        elif c == ",":
            chunk = c + "\n" + _pad(indent)
        elif c == ":":
            chunk = c + " "
        else:
            chunk = c

        pretty.append(chunk)
        last = chunk[-1]

    return "".join(pretty)


def print_pretty_json(text, console):
    console.say(pretty_json(text))
