import pytest

from shouldpack.assertions import AssertionFailure, should, should_raise


class _Parser:
    def parse(self, text):
        return int(text)

    def check(self):
        return should_raise(ValueError, lambda: self.parse("x"))

    def check_wrong_type(self):
        return should_raise(TypeError, lambda: self.parse("x"))


def _explode():
    raise KeyError("missing")


def test_should_raise_returns_wrapper_around_the_exception() -> None:
    wrapper = should_raise(ValueError, lambda: int("x"))

    assert isinstance(wrapper.value, ValueError)
    wrapper.should_be_a(ValueError)
    should(str(wrapper.value)).should_contain("invalid literal")


def test_subclasses_of_the_expected_type_match() -> None:
    wrapper = should_raise(LookupError, _explode)

    assert isinstance(wrapper.value, KeyError)


def test_no_exception_report_shows_the_callable_body() -> None:
    with pytest.raises(AssertionFailure) as excinfo:
        should_raise(ValueError, lambda: int("3"))

    assert str(excinfo.value) == 'int("3")\nshould raise <ValueError>\nbut didn\'t raise at all.'


def test_wrong_exception_report_chains_the_original_error() -> None:
    with pytest.raises(AssertionFailure) as excinfo:
        should_raise(ValueError, _explode, "while loading")

    assert str(excinfo.value) == (
        'raise KeyError("missing")\n'
        "should raise <ValueError>\n"
        "but raised   <KeyError>\n"
        "while loading"
    )
    assert isinstance(excinfo.value.__cause__, KeyError)


def test_receiver_prefix_is_stripped_from_the_report() -> None:
    parser = _Parser()

    assert isinstance(parser.check().value, ValueError)

    with pytest.raises(AssertionFailure) as excinfo:
        parser.check_wrong_type()
    assert str(excinfo.value).split("\n")[0] == 'parse("x")'

    with pytest.raises(AssertionFailure) as excinfo:
        should_raise(TypeError, lambda: parser.parse("x"))
    assert str(excinfo.value).split("\n")[0] == 'parser.parse("x")'


def test_explicit_label_replaces_the_callable_body() -> None:
    with pytest.raises(AssertionFailure) as excinfo:
        should_raise(ValueError, lambda: None, expr="load_config()")

    assert str(excinfo.value).split("\n")[0] == "load_config()"


def test_callable_without_source_falls_back_to_its_name() -> None:
    with pytest.raises(AssertionFailure) as excinfo:
        should_raise(ValueError, list)

    assert str(excinfo.value).split("\n")[0] == "list"


def test_base_exceptions_that_are_not_errors_propagate() -> None:
    def interrupt():
        raise KeyboardInterrupt

    with pytest.raises(KeyboardInterrupt):
        should_raise(ValueError, interrupt)

    should_raise(KeyboardInterrupt, interrupt)


def test_expected_type_must_be_an_exception_class() -> None:
    with pytest.raises(TypeError):
        should_raise("ValueError", _explode)


def test_method_form_on_a_wrapped_callable() -> None:
    wrapper = should(lambda: int("x"), "int('x')").should_raise(ValueError)

    assert isinstance(wrapper.value, ValueError)
    assert wrapper.expression == "int('x')"

    with pytest.raises(AssertionFailure) as excinfo:
        should(lambda: 1, "noop()").should_raise(ValueError)
    assert str(excinfo.value).split("\n")[0] == "noop()"

    with pytest.raises(TypeError):
        should(3).should_raise(ValueError)


def test_nested_expectations_report_their_own_callables() -> None:
    with pytest.raises(AssertionFailure) as excinfo:
        should_raise(TypeError, lambda: should_raise(KeyError, lambda: int("x")))

    assert str(excinfo.value).split("\n")[:3] == [
        'should_raise(KeyError, lambda: int("x"))',
        "should raise <TypeError>",
        "but raised   <AssertionFailure>",
    ]
    assert str(excinfo.value.__cause__).split("\n")[:3] == [
        'int("x")',
        "should raise <KeyError>",
        "but raised   <ValueError>",
    ]
