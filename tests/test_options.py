import unittest

from jsonpolish.cli.options import Options, parse_indent, parse_options
from jsonpolish.errors import ArityError, OptionError, UsageError


class TestDefaults(unittest.TestCase):
    def test_no_arguments(self) -> None:
        options, positionals = parse_options([])
        self.assertEqual(options, Options())
        self.assertEqual(options.indent, 2)
        self.assertFalse(options.sort_keys)
        self.assertFalse(options.compact)
        self.assertIsNone(options.out_file)
        self.assertEqual(positionals, [])

    def test_options_are_immutable(self) -> None:
        options, _ = parse_options([])
        with self.assertRaises(AttributeError):
            options.indent = 4


class TestFlags(unittest.TestCase):
    def test_all_flags_in_any_order(self) -> None:
        options, positionals = parse_options(
            ['in.json', '--sort-keys', '--indent', '4', '--out', 'out.json', '--compact'])
        self.assertEqual(options.indent, 4)
        self.assertTrue(options.sort_keys)
        self.assertTrue(options.compact)
        self.assertEqual(options.out_file, 'out.json')
        self.assertEqual(positionals, ['in.json'])

    def test_equals_forms(self) -> None:
        options, _ = parse_options(['--indent=8', '--out=a=b.json'])
        self.assertEqual(options.indent, 8)
        self.assertEqual(options.out_file, 'a=b.json')

    def test_compact_forces_zero_width(self) -> None:
        options, _ = parse_options(['--indent', '6', '--compact'])
        self.assertEqual(options.indent, 6)
        self.assertEqual(options.width, 0)

    def test_later_indent_wins(self) -> None:
        options, _ = parse_options(['--indent', '3', '--indent=5'])
        self.assertEqual(options.width, 5)

    def test_diagnostic_flags(self) -> None:
        options, _ = parse_options(['-v', '--debug', '--no-color'])
        self.assertTrue(options.verbose)
        self.assertTrue(options.debug)
        self.assertFalse(options.color)

    def test_out_consumes_flag_like_value(self) -> None:
        options, _ = parse_options(['--out', '--compact'])
        self.assertEqual(options.out_file, '--compact')
        self.assertFalse(options.compact)


class TestIndentValues(unittest.TestCase):
    def test_bounds_are_inclusive(self) -> None:
        self.assertEqual(parse_indent('0'), 0)
        self.assertEqual(parse_indent('16'), 16)

    def test_fraction_is_truncated(self) -> None:
        self.assertEqual(parse_indent('2.9'), 2)

    def test_surrounding_whitespace(self) -> None:
        self.assertEqual(parse_indent(' 4 '), 4)

    def test_decimal_notation(self) -> None:
        self.assertEqual(parse_indent('1e1'), 10)
        self.assertEqual(parse_indent('+3'), 3)
        self.assertEqual(parse_indent('.5'), 0)

    def test_rejected_values(self) -> None:
        for value in (None, '', 'two', '17', '20', '-1', 'nan', 'inf', '-Infinity',
                      '1_0', '0x10', '1e999', '\u0664'):
            with self.subTest(value=value):
                with self.assertRaises(OptionError) as ctx:
                    parse_indent(value)
                self.assertEqual(str(ctx.exception), '--indent must be a number between 0 and 16')

    def test_indent_consumes_flag_like_value(self) -> None:
        with self.assertRaises(OptionError):
            parse_options(['--indent', '--sort-keys'])


class TestErrors(unittest.TestCase):
    def test_missing_indent_value(self) -> None:
        with self.assertRaises(OptionError):
            parse_options(['--indent'])

    def test_missing_out_value(self) -> None:
        with self.assertRaises(OptionError) as ctx:
            parse_options(['--out'])
        self.assertEqual(str(ctx.exception), '--out requires a file path')

    def test_empty_out_value(self) -> None:
        with self.assertRaises(OptionError):
            parse_options(['--out='])
        with self.assertRaises(OptionError):
            parse_options(['--out', ''])

    def test_unknown_option(self) -> None:
        with self.assertRaises(OptionError) as ctx:
            parse_options(['--pretty'])
        self.assertEqual(str(ctx.exception), 'unknown option --pretty. Use --help.')

    def test_lone_dash_is_unknown(self) -> None:
        with self.assertRaises(OptionError):
            parse_options(['-'])

    def test_too_many_positionals(self) -> None:
        with self.assertRaises(ArityError) as ctx:
            parse_options(['{}', '[]'])
        self.assertTrue(str(ctx.exception).startswith('too many arguments'))

    def test_arity_error_is_an_option_error(self) -> None:
        self.assertTrue(issubclass(ArityError, OptionError))

    def test_first_error_is_reported(self) -> None:
        with self.assertRaises(OptionError) as ctx:
            parse_options(['--bogus', '--indent', '99'])
        self.assertIn('--bogus', str(ctx.exception))


class TestHelp(unittest.TestCase):
    def test_help_flags(self) -> None:
        for flag in ('-h', '--help'):
            with self.subTest(flag=flag):
                with self.assertRaises(UsageError) as ctx:
                    parse_options([flag])
                self.assertEqual(ctx.exception.exit_code, 0)
                self.assertIsNone(ctx.exception.text)

    def test_help_wins_over_earlier_errors(self) -> None:
        with self.assertRaises(UsageError) as ctx:
            parse_options(['--indent', '99', 'a', 'b', '--nope', '--help'])
        self.assertEqual(ctx.exception.exit_code, 0)

    def test_help_consumed_as_value_is_not_help(self) -> None:
        options, _ = parse_options(['--out', '--help'])
        self.assertEqual(options.out_file, '--help')

    def test_version(self) -> None:
        with self.assertRaises(UsageError) as ctx:
            parse_options(['--version'])
        self.assertEqual(ctx.exception.exit_code, 0)
        self.assertTrue(ctx.exception.text.startswith('json-polish '))


if __name__ == "__main__":
    unittest.main()
