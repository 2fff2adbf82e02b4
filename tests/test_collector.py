from localization_manager.core.collector import collect
from localization_manager.core.call_patterns.direct_call import DirectCall


def _localize_calls(unit):
    pattern = DirectCall()
    return collect(unit.root, lambda node: pattern.matches(unit, node))


def test_collects_calls_in_source_order(make_unit):
    unit = make_unit("""
        const a = nls.localize('first', 'First');
        function f() {
            if (x) {
                return nls.localize('second', 'Second');
            }
        }
        const c = foo(nls.localize('third', 'Third'), nls.localize('fourth', 'Fourth'));
    """)
    calls = _localize_calls(unit)
    assert [unit.text_of(call.child_by_field_name('arguments').named_children[0]) for call in calls] == [
        "'first'", "'second'", "'third'", "'fourth'",
    ]


def test_does_not_descend_into_matched_calls(make_unit):
    unit = make_unit("nls.localize('outer', nls.localize('inner', 'Inner'));")
    calls = _localize_calls(unit)
    assert len(calls) == 1
    assert unit.text_of(calls[0]).startswith("nls.localize('outer'")


def test_ignores_other_callees(make_unit):
    unit = make_unit("""
        localize('a', 'A');
        other.nls.localize('b', 'B');
        nls.localizeByDefault('c');
        nls?.localize('d', 'D');
    """)
    assert _localize_calls(unit) == []


def test_ignores_tagged_templates(make_unit):
    unit = make_unit("nls.localize`key`;")
    assert _localize_calls(unit) == []


def test_returns_root_when_it_matches(make_unit):
    unit = make_unit("const a = 1;")
    assert collect(unit.root, lambda node: True) == [unit.root]


def test_visits_every_node_once(make_unit):
    unit = make_unit("const a = [1, 2, { b: 'c' }];")
    seen = []
    collect(unit.root, lambda node: seen.append((node.start_byte, node.end_byte, node.type)) or False)
    assert len(seen) == len(set(seen))
    assert seen[0][2] == "program"
