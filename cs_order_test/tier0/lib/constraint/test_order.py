from unittest import TestCase

from cs_order.common import reports
from cs_order.common.pacemaker.constraint import (
    CibConstraintOrderAttributesDto,
    DependencyEdgeDto,
)
from cs_order.common.pacemaker.types import (
    DependencyKind,
    OrderEnsure,
    OrderResourcesType,
)
from cs_order.lib.constraint import order
from cs_order.lib.errors import (
    AttributeTypeError,
    ValidationError,
)

from cs_order_test.tools import fixture
from cs_order_test.tools.assertions import (
    assert_raise_library_error,
    assert_report_item_list_equal,
)

PCMK_BOOLEAN_HINT = (
    "a pacemaker boolean value: '0', '1', 'false', 'n', 'no', 'off', 'on', "
    "'true', 'y', 'yes'"
)


def _current(**kwargs):
    attributes = dict(
        constraint_id="o1",
        ensure=OrderEnsure.PRESENT,
        resources=["a", "b"],
        resources_type=OrderResourcesType.PRIMITIVE,
        cib=None,
        score="INFINITY",
        symmetrical=True,
    )
    attributes.update(kwargs)
    return CibConstraintOrderAttributesDto(**attributes)


class Defaults(TestCase):
    def test_defaults(self):
        constraint = order.OrderConstraint("o1", ["b", "a"])
        self.assertEqual(
            _current(),
            constraint.to_dto(),
        )
        self.assertEqual([], constraint.report_list)

    def test_all_attributes(self):
        constraint = order.OrderConstraint(
            "o1",
            ("g2", "g1"),
            resources_type="group",
            cib="shadow1",
            score=100,
            symmetrical="false",
            ensure="absent",
        )
        self.assertEqual(
            _current(
                ensure=OrderEnsure.ABSENT,
                resources=["g1", "g2"],
                resources_type=OrderResourcesType.GROUP,
                cib="shadow1",
                score="100",
                symmetrical=False,
            ),
            constraint.to_dto(),
        )


class Name(TestCase):
    def test_valid(self):
        self.assertEqual("o1", order.validate_name("o1"))

    def test_empty(self):
        assert_raise_library_error(
            lambda: order.validate_name(""),
            fixture.error(
                reports.codes.INVALID_OPTION_VALUE,
                option_name="name",
                option_value="",
                allowed_values="a constraint name",
                cannot_be_empty=True,
            ),
        )

    def test_not_string(self):
        with self.assertRaises(TypeError):
            order.OrderConstraint(None, ["a", "b"])


class Ensure(TestCase):
    def test_valid(self):
        self.assertEqual(OrderEnsure.ABSENT, order.validate_ensure("absent"))

    def test_invalid(self):
        assert_raise_library_error(
            lambda: order.validate_ensure("gone"),
            fixture.error(
                reports.codes.INVALID_OPTION_VALUE,
                option_name="ensure",
                option_value="gone",
                allowed_values=["present", "absent"],
                cannot_be_empty=False,
            ),
        )


class Resources(TestCase):
    def test_sorted(self):
        self.assertEqual(
            ["nodeA", "nodeB"],
            order.validate_and_normalize_resources(["nodeB", "nodeA"]),
        )

    def test_tuple(self):
        self.assertEqual(
            ["a", "b", "c"],
            order.validate_and_normalize_resources(("c", "a", "b")),
        )

    def test_duplicates_kept(self):
        self.assertEqual(
            ["a", "a", "b"],
            order.validate_and_normalize_resources(["a", "b", "a"]),
        )

    def test_exactly_two(self):
        self.assertEqual(
            ["a", "b"], order.validate_and_normalize_resources(["a", "b"])
        )

    def test_one_resource(self):
        assert_raise_library_error(
            lambda: order.validate_and_normalize_resources(["a"]),
            fixture.report_not_enough_resources(["a"]),
        )

    def test_no_resource(self):
        with self.assertRaises(ValueError):
            order.validate_and_normalize_resources([])

    def test_not_enough_is_validation_error(self):
        with self.assertRaises(ValidationError):
            order.OrderConstraint("o1", ["a"])

    def test_string(self):
        assert_raise_library_error(
            lambda: order.validate_and_normalize_resources("ab"),
            fixture.report_invalid_option_type(
                "resources", "an array of strings"
            ),
        )

    def test_string_is_type_error(self):
        with self.assertRaises(TypeError):
            order.OrderConstraint("o1", "ab")
        with self.assertRaises(AttributeTypeError):
            order.OrderConstraint("o1", "ab")

    def test_scalar(self):
        with self.assertRaises(TypeError):
            order.validate_and_normalize_resources(5)

    def test_set(self):
        with self.assertRaises(TypeError):
            order.validate_and_normalize_resources({"a", "b"})

    def test_mapping(self):
        with self.assertRaises(TypeError):
            order.validate_and_normalize_resources({"a": "1", "b": "2"})

    def test_not_string_item(self):
        with self.assertRaises(TypeError):
            order.validate_and_normalize_resources(["a", 1])


class ResourcesType(TestCase):
    def test_valid(self):
        self.assertEqual(
            OrderResourcesType.GROUP, order.validate_resources_type("group")
        )
        self.assertEqual(
            OrderResourcesType.PRIMITIVE,
            order.validate_resources_type("primitive"),
        )

    def test_invalid(self):
        assert_raise_library_error(
            lambda: order.validate_resources_type("bogus"),
            fixture.error(
                reports.codes.INVALID_OPTION_VALUE,
                option_name="resources_type",
                option_value="bogus",
                allowed_values=["primitive", "group"],
                cannot_be_empty=False,
            ),
        )

    def test_case_sensitive(self):
        with self.assertRaises(ValidationError):
            order.validate_resources_type("Group")

    def test_not_string(self):
        with self.assertRaises(AttributeTypeError):
            order.validate_resources_type(None)


class Cib(TestCase):
    def test_none(self):
        self.assertIsNone(order.validate_cib(None))

    def test_valid(self):
        self.assertEqual("shadow1", order.validate_cib("shadow1"))

    def test_empty(self):
        assert_raise_library_error(
            lambda: order.validate_cib(""),
            fixture.error(
                reports.codes.INVALID_OPTION_VALUE,
                option_name="cib",
                option_value="",
                allowed_values="a shadow CIB name",
                cannot_be_empty=True,
            ),
        )

    def test_not_string(self):
        assert_raise_library_error(
            lambda: order.validate_cib(5),
            fixture.report_invalid_option_type("cib", "a string"),
        )


class Score(TestCase):
    def test_integer(self):
        self.assertEqual("100", order.validate_and_normalize_score(100))

    def test_negative_infinity(self):
        self.assertEqual(
            "-INFINITY", order.validate_and_normalize_score("-INFINITY")
        )

    def test_not_string(self):
        assert_raise_library_error(
            lambda: order.validate_and_normalize_score(["1"]),
            fixture.report_invalid_option_type(
                "score", "a string or an integer"
            ),
        )

    def test_bool_is_not_integer(self):
        with self.assertRaises(TypeError):
            order.validate_and_normalize_score(True)

    def test_valid_score_no_warnings(self):
        self.assertEqual([], order.get_score_warnings("+INFINITY"))
        self.assertEqual([], order.get_score_warnings("-10"))

    def test_invalid_score_warning(self):
        assert_report_item_list_equal(
            order.get_score_warnings("bogus"),
            [fixture.warn(reports.codes.INVALID_SCORE, score="bogus")],
        )

    def test_invalid_score_accepted(self):
        constraint = order.OrderConstraint("o1", ["a", "b"], score="bogus")
        self.assertEqual("bogus", constraint.score)
        assert_report_item_list_equal(
            constraint.report_list,
            [fixture.warn(reports.codes.INVALID_SCORE, score="bogus")],
        )

    def test_set_score_replaces_warning(self):
        constraint = order.OrderConstraint("o1", ["a", "b"], score="bogus")
        self.assertEqual("50", constraint.set_score(50))
        self.assertEqual([], constraint.report_list)
        constraint.set_score("other")
        assert_report_item_list_equal(
            constraint.report_list,
            [fixture.warn(reports.codes.INVALID_SCORE, score="other")],
        )


class Symmetrical(TestCase):
    def test_bool(self):
        self.assertTrue(order.validate_and_normalize_symmetrical(True))
        self.assertFalse(order.validate_and_normalize_symmetrical(False))

    def test_pacemaker_booleans(self):
        for value, expected in (
            ("true", True),
            ("false", False),
            ("Yes", True),
            ("off", False),
            ("1", True),
            ("n", False),
        ):
            with self.subTest(value=value):
                self.assertEqual(
                    expected, order.validate_and_normalize_symmetrical(value)
                )

    def test_invalid_string(self):
        assert_raise_library_error(
            lambda: order.validate_and_normalize_symmetrical("maybe"),
            fixture.error(
                reports.codes.INVALID_OPTION_VALUE,
                option_name="symmetrical",
                option_value="maybe",
                allowed_values=PCMK_BOOLEAN_HINT,
                cannot_be_empty=False,
            ),
        )

    def test_not_boolean(self):
        assert_raise_library_error(
            lambda: order.validate_and_normalize_symmetrical(1),
            fixture.report_invalid_option_type("symmetrical", "a boolean"),
        )


class Setters(TestCase):
    def setUp(self):
        self.constraint = order.OrderConstraint("o1", ["a", "b"])

    def test_set_resources(self):
        self.assertEqual(
            ["x", "y", "z"], self.constraint.set_resources(["z", "x", "y"])
        )
        self.assertEqual(["x", "y", "z"], self.constraint.resources)

    def test_failed_set_keeps_value(self):
        with self.assertRaises(ValidationError):
            self.constraint.set_resources(["z"])
        self.assertEqual(["a", "b"], self.constraint.resources)

    def test_set_resources_type(self):
        self.constraint.set_resources_type("group")
        self.assertEqual(
            OrderResourcesType.GROUP, self.constraint.resources_type
        )

    def test_set_cib(self):
        self.assertEqual("s1", self.constraint.set_cib("s1"))
        self.assertIsNone(self.constraint.set_cib(None))

    def test_set_symmetrical(self):
        self.assertFalse(self.constraint.set_symmetrical("no"))
        self.assertFalse(self.constraint.symmetrical)

    def test_set_ensure(self):
        self.assertEqual(
            OrderEnsure.ABSENT, self.constraint.set_ensure("absent")
        )

    def test_resources_copy(self):
        self.constraint.resources.append("c")
        self.assertEqual(["a", "b"], self.constraint.resources)

    def test_idempotent(self):
        self.constraint.set_resources(self.constraint.resources)
        self.constraint.set_score(self.constraint.score)
        self.constraint.set_symmetrical(self.constraint.symmetrical)
        self.assertEqual(
            order.OrderConstraint("o1", ["b", "a"]), self.constraint
        )


class FromOptions(TestCase):
    def test_success(self):
        constraint = order.OrderConstraint.from_options(
            "o1",
            {
                "resources": ["b", "a"],
                "resources_type": "group",
                "symmetrical": "false",
            },
        )
        self.assertEqual(
            order.OrderConstraint(
                "o1", ["a", "b"], resources_type="group", symmetrical=False
            ),
            constraint,
        )

    def test_unknown_and_missing_options(self):
        assert_raise_library_error(
            lambda: order.OrderConstraint.from_options("o1", {"foo": "bar"}),
            fixture.error(
                reports.codes.INVALID_OPTIONS,
                option_names=["foo"],
                allowed=[
                    "cib",
                    "ensure",
                    "resources",
                    "resources_type",
                    "score",
                    "symmetrical",
                ],
                option_type="order constraint",
            ),
            fixture.error(
                reports.codes.REQUIRED_OPTIONS_ARE_MISSING,
                option_names=["resources"],
                option_type="order constraint",
            ),
        )

    def test_name_is_not_an_option(self):
        with self.assertRaises(ValidationError):
            order.OrderConstraint.from_options(
                "o1", {"name": "o1", "resources": ["a", "b"]}
            )

    def test_all_errors_reported(self):
        assert_raise_library_error(
            lambda: order.OrderConstraint.from_options(
                "",
                {
                    "resources": ["a"],
                    "resources_type": "bogus",
                    "symmetrical": "maybe",
                },
            ),
            fixture.error(
                reports.codes.INVALID_OPTION_VALUE,
                option_name="name",
                option_value="",
                allowed_values="a constraint name",
                cannot_be_empty=True,
            ),
            fixture.report_not_enough_resources(["a"]),
            fixture.error(
                reports.codes.INVALID_OPTION_VALUE,
                option_name="resources_type",
                option_value="bogus",
                allowed_values=["primitive", "group"],
                cannot_be_empty=False,
            ),
            fixture.error(
                reports.codes.INVALID_OPTION_VALUE,
                option_name="symmetrical",
                option_value="maybe",
                allowed_values=PCMK_BOOLEAN_HINT,
                cannot_be_empty=False,
            ),
        )

    def test_type_errors_only(self):
        with self.assertRaises(AttributeTypeError):
            order.OrderConstraint.from_options(
                "o1", {"resources": "a", "cib": 1}
            )

    def test_mixed_errors(self):
        with self.assertRaises(ValidationError) as cm:
            order.OrderConstraint.from_options(
                "o1", {"resources": "a", "symmetrical": "maybe"}
            )
        self.assertNotIsInstance(cm.exception, TypeError)
        assert_report_item_list_equal(
            cm.exception.args,
            [
                fixture.report_invalid_option_type(
                    "resources", "an array of strings"
                ),
                fixture.error(
                    reports.codes.INVALID_OPTION_VALUE,
                    option_name="symmetrical",
                    option_value="maybe",
                    allowed_values=PCMK_BOOLEAN_HINT,
                    cannot_be_empty=False,
                ),
            ],
        )

    def test_invalid_score_is_not_an_error(self):
        constraint = order.OrderConstraint.from_options(
            "o1", {"resources": ["a", "b"], "score": "bogus"}
        )
        assert_report_item_list_equal(
            constraint.report_list,
            [fixture.warn(reports.codes.INVALID_SCORE, score="bogus")],
        )


class Edges(TestCase):
    def test_sorted_primitives(self):
        constraint = order.OrderConstraint("o1", ["nodeB", "nodeA"])
        self.assertEqual(["nodeA", "nodeB"], constraint.resources)
        self.assertEqual(
            [
                DependencyEdgeDto(DependencyKind.PRIMITIVE, "nodeA"),
                DependencyEdgeDto(DependencyKind.PRIMITIVE, "nodeB"),
            ],
            constraint.resource_edges(),
        )
        self.assertEqual(
            [],
            constraint.resource_edges(
                for_resources_type=OrderResourcesType.GROUP
            ),
        )

    def test_normalized_names_keep_raw_order(self):
        constraint = order.OrderConstraint("o1", ["res2", "ms_res1:0"])
        self.assertEqual(["ms_res1:0", "res2"], constraint.resources)
        self.assertEqual(
            [
                DependencyEdgeDto(DependencyKind.PRIMITIVE, "res1"),
                DependencyEdgeDto(DependencyKind.PRIMITIVE, "res2"),
            ],
            constraint.resource_edges(),
        )

    def test_resource_edges_by_type(self):
        constraint = order.OrderConstraint(
            "o1", ["g2", "g1"], resources_type="group"
        )
        self.assertEqual(
            {
                OrderResourcesType.PRIMITIVE: [],
                OrderResourcesType.GROUP: [
                    DependencyEdgeDto(DependencyKind.GROUP, "g1"),
                    DependencyEdgeDto(DependencyKind.GROUP, "g2"),
                ],
            },
            constraint.resource_edges_by_type(),
        )

    def test_context_edges(self):
        self.assertEqual(
            [], order.OrderConstraint("o1", ["a", "b"]).context_edges()
        )
        self.assertEqual(
            [DependencyEdgeDto(DependencyKind.SHADOW_CIB, "shadow1")],
            order.OrderConstraint(
                "o1", ["a", "b"], cib="shadow1"
            ).context_edges(),
        )

    def test_membership_edges(self):
        constraint = order.OrderConstraint("o1", ["a", "b"])
        self.assertEqual(
            [DependencyEdgeDto(DependencyKind.SERVICE, "corosync")],
            constraint.membership_edges(),
        )
        self.assertEqual(
            [DependencyEdgeDto(DependencyKind.SERVICE, "pacemaker")],
            constraint.membership_edges("pacemaker"),
        )

    def test_autorequire(self):
        constraint = order.OrderConstraint(
            "o1", ["b", "a"], cib="s1", ensure="absent"
        )
        self.assertEqual(
            [
                DependencyEdgeDto(DependencyKind.SHADOW_CIB, "s1"),
                DependencyEdgeDto(DependencyKind.SERVICE, "corosync"),
                DependencyEdgeDto(DependencyKind.PRIMITIVE, "a"),
                DependencyEdgeDto(DependencyKind.PRIMITIVE, "b"),
            ],
            constraint.autorequire(),
        )


class OutOfSyncProperties(TestCase):
    def test_in_sync(self):
        constraint = order.OrderConstraint("o1", ["b", "a"])
        self.assertEqual([], constraint.out_of_sync_properties(_current()))

    def test_resources_order_does_not_matter(self):
        constraint = order.OrderConstraint("o1", ["a", "b"])
        self.assertEqual(
            [],
            constraint.out_of_sync_properties(_current(resources=["b", "a"])),
        )

    def test_parameters_not_compared(self):
        constraint = order.OrderConstraint(
            "o1", ["a", "b"], cib="s1", resources_type="group"
        )
        self.assertEqual([], constraint.out_of_sync_properties(_current()))

    def test_differ(self):
        constraint = order.OrderConstraint(
            "o1", ["a", "c"], score="10", symmetrical=False
        )
        self.assertEqual(
            ["resources", "score", "symmetrical"],
            constraint.out_of_sync_properties(_current()),
        )

    def test_ensure_differs(self):
        constraint = order.OrderConstraint("o1", ["a", "c"], ensure="absent")
        self.assertEqual(
            ["ensure"], constraint.out_of_sync_properties(_current())
        )

    def test_absent(self):
        constraint = order.OrderConstraint("o1", ["a", "c"], ensure="absent")
        self.assertEqual(
            [],
            constraint.out_of_sync_properties(
                _current(ensure=OrderEnsure.ABSENT)
            ),
        )


class Equality(TestCase):
    def test_equal(self):
        self.assertEqual(
            order.OrderConstraint("o1", ["b", "a"], score=10),
            order.OrderConstraint("o1", ("a", "b"), score="10"),
        )

    def test_not_equal(self):
        self.assertNotEqual(
            order.OrderConstraint("o1", ["a", "b"]),
            order.OrderConstraint("o2", ["a", "b"]),
        )

    def test_other_type(self):
        self.assertNotEqual(order.OrderConstraint("o1", ["a", "b"]), "o1")


class DescribeAttributes(TestCase):
    def test_names(self):
        self.assertEqual(
            [
                "name",
                "ensure",
                "resources",
                "resources_type",
                "cib",
                "score",
                "symmetrical",
            ],
            [attribute.name for attribute in order.describe_attributes()],
        )

    def test_properties_and_parameters(self):
        description = {
            attribute.name: attribute
            for attribute in order.describe_attributes()
        }
        self.assertTrue(description["resources"].is_property)
        self.assertTrue(description["resources"].required)
        self.assertFalse(description["cib"].is_property)
        self.assertIsNone(description["cib"].default)
        self.assertEqual(
            ["primitive", "group"], description["resources_type"].allowed_values
        )
        self.assertEqual("INFINITY", description["score"].default)
        self.assertIs(True, description["symmetrical"].default)
