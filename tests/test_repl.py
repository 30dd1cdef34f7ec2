import rpn_repl


class TestCommandLine():
    def test_expression(self, capsys):
        assert rpn_repl.main(['3', '4', '+']) == 0

        assert capsys.readouterr().out == '7.0 ok\n'

    def test_quoted_expression(self, capsys):
        assert rpn_repl.main(['15 7 1 1 + - / 3 * 2 1 1 + + -']) == 0

        assert capsys.readouterr().out == '5.0 ok\n'

    def test_error(self, capsys):
        assert rpn_repl.main(['1', '+']) == 1

        out, err = capsys.readouterr()
        assert out == ''
        assert 'stack underflow' in err

    def test_strict(self, capsys):
        assert rpn_repl.main(['--strict', '1 2']) == 1
        assert 'exactly one value' in capsys.readouterr().err

    def test_trace(self, capsys):
        assert rpn_repl.main(['--trace', '1 2 +']) == 0

        out = capsys.readouterr().out
        assert 'OPERAND:1.0 OPERAND:2.0 OPERATOR:+' in out
        assert '[1.0, 2.0]' in out
        assert out.endswith('3.0 ok\n')

    def test_trace_lex_error(self, capsys):
        assert rpn_repl.main(['--trace', '7 a']) == 1
        assert 'unrecognized character' in capsys.readouterr().err

    def test_trace_failure_prints_no_stacks(self, capsys):
        assert rpn_repl.main(['--trace', '1 2 + +']) == 1

        out, err = capsys.readouterr()
        assert out == ''
        assert err == ' ? stack underflow for operator +\n'

    def test_trace_strict(self, capsys):
        assert rpn_repl.main(['--trace', '--strict', '1 2']) == 1

        out, err = capsys.readouterr()
        assert out == ''
        assert 'exactly one value' in err


class TestREPL():
    def feed(self, monkeypatch, lines):
        lines = iter(lines)

        def fake_input(prompt=''):
            try:
                return next(lines)
            except StopIteration:
                raise EOFError()

        monkeypatch.setattr('builtins.input', fake_input)

    def test_bye(self, monkeypatch, capsys):
        self.feed(monkeypatch, ['3 4 +', '1 +', 'bye', '5 5 +'])

        assert rpn_repl.main([]) == 0

        out = capsys.readouterr().out
        assert '7.0 ok' in out
        assert ' ? stack underflow for operator +' in out
        assert '10.0' not in out

    def test_end_of_file(self, monkeypatch, capsys):
        self.feed(monkeypatch, ['2 2 *'])

        assert rpn_repl.main([]) == 0
        assert '4.0 ok' in capsys.readouterr().out
