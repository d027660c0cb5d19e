import sys


class Console:
    """Построчный ввод/вывод терминала: один объект на меню, формы ввода и HTTP-хелперы."""

    def __init__(self, stdin=None, stdout=None):
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout

    def ask(self, prompt=""):
        self.stdout.write(prompt)
        self.stdout.flush()
        line = self.stdin.readline()
        if line == "":
            raise EOFError("stdin closed")
        return line.rstrip("\r\n")

    def say(self, *parts):
        print(*parts, file=self.stdout)
