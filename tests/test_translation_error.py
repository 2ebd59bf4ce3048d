from docsite.domain.errors import TranslationError


def test_message_names_step_demo_and_input():
    error = TranslationError("rewrite", "bad script", fragment="angular.module(", demo_id="spec-demo")

    assert error.step == "rewrite"
    assert error.reason == "bad script"
    assert str(error) == (
        "Codepen translation failed at step 'rewrite' for demo 'spec-demo': "
        "bad script (input: 'angular.module(')"
    )


def test_long_fragments_are_truncated_in_message():
    fragment = "x" * 500
    error = TranslationError("augment", "no root", fragment=fragment)

    assert error.fragment == fragment
    assert "x" * 77 + "..." in str(error)
    assert "x" * 78 not in str(error)


def test_message_without_fragment_or_demo():
    error = TranslationError("aggregate", "bad url")
    assert str(error) == "Codepen translation failed at step 'aggregate': bad url"
    assert isinstance(error, RuntimeError)
