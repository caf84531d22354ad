import unittest

from concurrent.futures import ThreadPoolExecutor
from textwrap import dedent

from .....plugins.module_utils.semantic_string import (
    PARSE_ERRORS,
    SEMANTIC_STRING_TYPE,
    SEVERITY_ERROR,
    SEVERITY_WARNING,
    SemanticStringType,
    SemanticStringValue,
    StringValuable,
    StringValuableWithSemanticEquals,
    parse_payload,
    trees_equal,
)


def semantic_equals(current: str, given: str):
    return SemanticStringValue(current).semantic_equals(SemanticStringValue(given))


class SemanticStringValueTester(unittest.TestCase):

    def test_mismatched_field_values(self):
        matched, _ = semantic_equals(
            '"{"exampleVariables":[{"name":"bar","namespace":"bar-namespace","type":0}]}"',
            '{"exampleVariables":[{"name":"bar","namespace":"bar-namespace","type":1}]}')
        assert matched == False

        matched, diags = semantic_equals(
            '{"exampleVariables":[{"name":"bar","namespace":"bar-namespace","type":0}]}',
            '{"exampleVariables":[{"name":"bar","namespace":"bar-namespace","type":1}]}')
        assert matched == False
        assert diags == []

    def test_mismatched_field_names(self):
        matched, diags = semantic_equals(
            '{"exampleVariables":[{"Name":"bar","namespace":"bar-namespace","type":0}]}',
            '{"exampleVariables":[{"name":"bar","namespace":"bar-namespace","type":0}]}')
        assert matched == False
        assert diags == []

    def test_additional_null_field(self):
        matched, diags = semantic_equals(
            '{"exampleVariables":[{"name":"bar","namespace":"bar-namespace","type":0}],"new-field": null}',
            '{"exampleVariables":[{"name":"bar","namespace":"bar-namespace","type":0}]}')
        assert matched == False
        assert diags == []

    def test_key_order_inside_array_item_is_equal(self):
        # Reordering keys inside an object is not a change, even when the
        # object sits in an array.
        matched, diags = semantic_equals(
            '{"exampleVariables":[{"namespace":"bar-namespace","name":"bar","type":0}]}',
            '{"exampleVariables":[{"name":"bar","namespace":"bar-namespace","type":0}]}')
        assert matched == True
        assert diags == []

    def test_array_item_order_difference(self):
        matched, diags = semantic_equals(
            '{"exampleVariables":[{"name":"foo"},{"name":"bar"}]}',
            '{"exampleVariables":[{"name":"bar"},{"name":"foo"}]}')
        assert matched == False
        assert diags == []

    def test_byte_for_byte_match(self):
        payload = '{"exampleVariables":[{"name":"bar","namespace":"bar-namespace","type":0}]}'
        matched, diags = semantic_equals(payload, payload)
        assert matched == True
        assert diags == []

    def test_json_whitespace_difference_is_equal(self):
        # Indentation outside string values carries no meaning, so the same
        # document pretty-printed and minified compares equal.
        matched, diags = semantic_equals(
            """{
\t\t\t\t"hello": "world",
\t\t\t\t"nums": [1, 2, 3],
\t\t\t\t"nested": {
\t\t\t\t\t"test-bool": true
\t\t\t\t}
\t\t\t}""",
            '{"hello":"world","nums":[1,2,3],"nested":{"test-bool":true}}')
        assert matched == True
        assert diags == []

    def test_whitespace_inside_string_value_is_a_difference(self):
        matched, _ = semantic_equals('{"hello": "wor ld"}', '{"hello": "world"}')
        assert matched == False

    def test_yaml_no_difference(self):
        payload = "os: Linux\nautomation: ansible-devel"
        matched, diags = semantic_equals(payload, payload)
        assert matched == True
        assert diags == []

    def test_yaml_no_difference_with_newline(self):
        matched, diags = semantic_equals(
            "os: Linux\nautomation: ansible-devel",
            "os: Linux\nautomation: ansible-devel\n\n\n")
        assert matched == True
        assert diags == []

    def test_yaml_leading_blank_lines_and_trailing_spaces(self):
        matched, diags = semantic_equals(
            "\n\nos: Linux   \nautomation: ansible-devel",
            "os: Linux\nautomation: ansible-devel\n")
        assert matched == True
        assert diags == []

    def test_yaml_key_order(self):
        matched, _ = semantic_equals(
            dedent("""\
                os: Linux
                packages:
                  - nginx
                  - git
                """),
            dedent("""\
                packages:
                - nginx
                - git
                os: Linux
                """))
        assert matched == True

    def test_yaml_sequence_order(self):
        matched, _ = semantic_equals("- nginx\n- git\n", "- git\n- nginx\n")
        assert matched == False

    def test_yaml_fallback_against_json(self):
        matched, diags = semantic_equals(
            'os: Linux\nports: [80, 443]\n',
            '{"os": "Linux", "ports": [80, 443]}')
        assert matched == True
        assert diags == []

    def test_yaml_fallback_both_sides(self):
        matched, diags = semantic_equals(
            "env:\n  name: prod\n  replicas: 3\n",
            "env: {name: prod, replicas: 3}")
        assert matched == True
        assert diags == []

    def test_unstructured_text(self):
        matched, diags = semantic_equals("just some words", "some other words")
        assert matched == False
        assert len(diags) == 1
        assert diags[0].severity == SEVERITY_WARNING

    def test_folded_plain_text_is_a_difference(self):
        # Both load as the same folded YAML scalar, but the commands differ.
        matched, diags = semantic_equals('echo one\necho two', 'echo one echo two')
        assert matched == False
        assert len(diags) == 1

    def test_plain_text_against_mapping(self):
        matched, diags = semantic_equals('os: Linux', 'os Linux')
        assert matched == False
        assert len(diags) == 1

    def test_identical_plain_text(self):
        assert semantic_equals('echo one\necho two', 'echo one\necho two') == (True, [])

    def test_non_string_keys_compare_by_kind(self):
        matched, diags = semantic_equals('true: x', '1: x')
        assert matched == False
        assert diags == []

        matched, _ = semantic_equals('1: x', '"1": x')
        assert matched == False

        matched, _ = semantic_equals('1: x\n', '{1: x}')
        assert matched == True

    def test_deeply_nested_unclosed_json(self):
        matched, diags = semantic_equals('[' * 100000, '[]')
        assert matched == False
        assert len(diags) == 1
        assert diags[0].severity == SEVERITY_WARNING

    def test_deeply_nested_json(self):
        depth = 500
        matched, diags = semantic_equals(
            '[' * depth + '1' + ']' * depth,
            '[' * depth + '2' + ']' * depth)
        assert matched == False
        assert diags == []

        matched, diags = semantic_equals(
            '[' * depth + '{"a": 1}' + ']' * depth,
            '[ ' * depth + '{"a": 1.0}' + ' ]' * depth)
        assert matched == True
        assert diags == []

    def test_nesting_beyond_parser_limits(self):
        depth = 100000
        matched, diags = semantic_equals(
            '[' * depth + '1' + ']' * depth,
            '[' * depth + '2' + ']' * depth)
        assert matched == False
        assert len(diags) == 1

    def test_unparseable_payloads(self):
        matched, diags = semantic_equals("key: [unclosed", "other: {also unclosed")
        assert matched == False
        assert len(diags) == 1
        assert diags[0].severity == SEVERITY_WARNING
        assert diags[0].summary == 'Semantic Equality Check Skipped'

    def test_unparseable_on_one_side(self):
        matched, diags = semantic_equals('{"a": 1}', "a: [1")
        assert matched == False
        assert len(diags) == 1

    def test_numbers_compare_by_value(self):
        matched, _ = semantic_equals('{"a": 1}', '{"a": 1.0}')
        assert matched == True

        matched, _ = semantic_equals('{"a": 1}', '{"a": 2}')
        assert matched == False

    def test_boolean_is_not_a_number(self):
        matched, diags = semantic_equals('{"a": true}', '{"a": 1}')
        assert matched == False
        assert diags == []

    def test_kind_mismatch(self):
        for current, given in [
            ('{"a": "1"}', '{"a": 1}'),
            ('{"a": {}}', '{"a": []}'),
            ('{"a": null}', '{"a": false}'),
            ('[1]', '{"0": 1}'),
        ]:
            matched, diags = semantic_equals(current, given)
            assert matched == False, f"{current} should differ from {given}"
            assert diags == []

    def test_symmetry(self):
        pairs = [
            ('{"a":1,"b":2}', '{"b":2,"a":1}'),
            ('{"a":[1,2]}', '{"a":[2,1]}'),
            ('{"Name":"x"}', '{"name":"x"}'),
            ('{"a":1}', '{"a":1,"b":null}'),
            ('[]', '{}'),
        ]
        for a, b in pairs:
            assert semantic_equals(a, b)[0] == semantic_equals(b, a)[0]

    def test_reflexivity(self):
        for payload in ['{}', '[]', 'null', '"text"', '{"a": {"b": [1, {"c": null}]}}']:
            assert semantic_equals(payload, payload)[0] == True

        matched, _ = semantic_equals(
            '{"a": {"b": [1, {"c": null}]}, "d": true}',
            '{ "d" : true ,\n  "a" : { "b" : [ 1 , { "c" : null } ] } }')
        assert matched == True

    def test_properties(self):
        assert semantic_equals('{"a":[1,2]}', '{"a":[2,1]}')[0] == False
        assert semantic_equals('{"a":1,"b":2}', '{"b":2,"a":1}')[0] == True
        assert semantic_equals('{"Name":"x"}', '{"name":"x"}')[0] == False
        assert semantic_equals('{"a":1}', '{"a":1,"b":null}')[0] == False

    def test_empty_payloads(self):
        assert semantic_equals('', '')[0] == True
        # Blank text is not a mapping or sequence; only identical text matches.
        matched, diags = semantic_equals('', '\n  \n')
        assert matched == False
        assert len(diags) == 1
        assert semantic_equals('', '{}')[0] == False

    def test_null_and_unknown(self):
        null = SemanticStringValue.null()
        unknown = SemanticStringValue.unknown()
        known = SemanticStringValue('')

        assert null.semantic_equals(SemanticStringValue.null()) == (True, [])
        assert unknown.semantic_equals(SemanticStringValue.unknown()) == (True, [])
        assert null.semantic_equals(unknown) == (False, [])
        assert null.semantic_equals(known) == (False, [])
        assert known.semantic_equals(unknown) == (False, [])

        assert null.is_null() and not null.is_unknown()
        assert unknown.is_unknown() and not unknown.is_null()
        assert null.to_native() is None
        assert unknown.to_native() is None

    def test_unexpected_type(self):
        matched, diags = SemanticStringValue('1').semantic_equals(1)
        assert matched == False
        assert len(diags) == 1
        assert diags[0].severity == SEVERITY_ERROR
        assert 'int' in diags[0].detail

    def test_compare_with_plain_string(self):
        matched, diags = SemanticStringValue('{"a": 1}').semantic_equals('a: 1')
        assert matched == True
        assert diags == []

    def test_compare_with_other_string_valuable(self):

        class Other(StringValuable):
            def to_native(self):
                return '{"b": 2, "a": 1}'

        matched, _ = SemanticStringValue('{"a": 1, "b": 2}').semantic_equals(Other())
        assert matched == True

    def test_raw_value_is_verbatim(self):
        payload = '  {"b": 2,\n "a": 1}  \n'
        value = SemanticStringValue(payload)
        assert value.raw_value() == payload
        assert value.to_native() == payload
        assert str(value) == payload

    def test_from_native(self):
        assert SemanticStringValue.from_native(None).is_null()
        assert SemanticStringValue.from_native('a: 1').raw_value() == 'a: 1'
        assert SemanticStringValue.from_native(5).raw_value() == '5'

        value = SemanticStringValue.from_native({'os': 'Linux', 'ports': [80]})
        assert value.raw_value() == '{"os": "Linux", "ports": [80]}'
        assert value.semantic_equals(SemanticStringValue("os: Linux\nports:\n- 80\n"))[0] == True

        existing = SemanticStringValue('x')
        assert SemanticStringValue.from_native(existing) is existing

    def test_strict_equality(self):
        assert SemanticStringValue('{"a":1}') == SemanticStringValue('{"a":1}')
        assert SemanticStringValue('{"a":1}') != SemanticStringValue('{"a": 1}')
        assert SemanticStringValue('') != SemanticStringValue.null()
        assert SemanticStringValue.null() == SemanticStringValue.null()
        assert SemanticStringValue('x') != 'x'
        assert len({SemanticStringValue('x'), SemanticStringValue('x'), SemanticStringValue('y')}) == 2

    def test_distinct_instances(self):
        a = SemanticStringValue('{"a":1}')
        b = SemanticStringValue('{"a":1}')
        assert a is not b
        assert a == b

    def test_type_tag(self):
        value = SemanticStringValue('x')
        assert value.type == SEMANTIC_STRING_TYPE
        assert value.type == SemanticStringType()
        assert value.type.TYPE_TAG == 'infra.aap.semantic_string'
        assert SEMANTIC_STRING_TYPE.value_from_native('a: 1').raw_value() == 'a: 1'
        assert isinstance(value, StringValuableWithSemanticEquals)
        assert not isinstance(value, str)

    def test_immutable(self):
        value = SemanticStringValue('x')
        with self.assertRaises(AttributeError):
            value.raw = 'y'

    def test_concurrent_comparisons(self):
        pairs = [
            ('{"a":1,"b":[1,2]}', '{"b":[1,2],"a":1}', True),
            ('a: 1\nb: [1, 2]\n', '{"a": 1, "b": [2, 1]}', False),
            ('os: Linux\n', 'os: Linux\n\n', True),
        ] * 50

        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(lambda p: semantic_equals(p[0], p[1])[0], pairs))

        assert results == [p[2] for p in pairs]


class TreesEqualTester(unittest.TestCase):

    def test_trees_equal(self):
        assert trees_equal({'a': [1, {'b': None}]}, {'a': [1.0, {'b': None}]})
        assert not trees_equal({'a': [1]}, {'a': [1, 1]})
        assert not trees_equal({'a': 1}, {'A': 1})
        assert not trees_equal(True, 1)
        assert not trees_equal(0, False)
        assert trees_equal(float('nan'), float('nan'))

    def test_mapping_keys_keep_their_kind(self):
        assert not trees_equal({True: 'x'}, {1: 'x'})
        assert not trees_equal({1: 'x'}, {'1': 'x'})
        assert trees_equal({1: 'x'}, {1.0: 'x'})

    def test_deep_trees(self):
        left, right = 1, 2
        for _ in range(100000):
            left, right = [left], [right]
        assert not trees_equal(left, right)
        assert trees_equal(left, left)

    def test_parse_payload(self):
        assert parse_payload('{"a": 1}') == {'a': 1}
        assert parse_payload('a: 1') == {'a': 1}
        with self.assertRaises(PARSE_ERRORS):
            parse_payload('a: [1')
        with self.assertRaises(PARSE_ERRORS):
            parse_payload('[' * 100000)
