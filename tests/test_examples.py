from faker import Faker

from api_doc_extractor.generator.examples import NUMERIC_EXAMPLES, ExampleValueSynthesizer


class TestSynthesize:
    def setup_method(self):
        self.synth = ExampleValueSynthesizer.seeded(7)

    def test_integer_is_non_negative_int(self):
        value = self.synth.synthesize("integer")
        assert isinstance(value, int) and not isinstance(value, bool)
        assert value >= 0

    def test_float(self):
        assert isinstance(self.synth.synthesize("float"), float)

    def test_boolean_is_real_bool(self):
        assert isinstance(self.synth.synthesize("boolean"), bool)

    def test_numeric_drawn_from_menu(self):
        for _ in range(20):
            assert self.synth.synthesize("numeric") in NUMERIC_EXAMPLES

    def test_string_is_word(self):
        word = self.synth.synthesize("string")
        assert isinstance(word, str) and word.strip() == word and word

    def test_array_and_json_literals(self):
        assert self.synth.synthesize("array") == "[]"
        assert self.synth.synthesize("json") == "{}"

    def test_image_is_url(self):
        assert self.synth.synthesize("image").startswith("http")

    def test_unknown_type_falls_back_to_string(self):
        assert isinstance(self.synth.synthesize("min:1|integer-ish"), str)

    def test_same_seed_same_values(self):
        first = ExampleValueSynthesizer.seeded(42)
        second = ExampleValueSynthesizer.seeded(42)
        types = ["integer", "float", "boolean", "string", "numeric", "image"]
        assert [first.synthesize(t) for t in types] == [second.synthesize(t) for t in types]

    def test_register_custom_generator(self):
        self.synth.register("string", lambda fake: "fixed")
        assert self.synth.synthesize("string") == "fixed"
        assert self.synth.synthesize("unknown") == "fixed"

    def test_uses_supplied_faker(self):
        fake = Faker()
        fake.seed_instance(11)
        expected = Faker()
        expected.seed_instance(11)
        assert ExampleValueSynthesizer(fake).synthesize("string") == expected.word()


class TestCast:
    def setup_method(self):
        self.synth = ExampleValueSynthesizer.seeded(0)

    def test_false_text_is_false(self):
        assert self.synth.cast("false", "boolean") is False

    def test_true_text_is_true(self):
        assert self.synth.cast("true", "boolean") is True
        assert self.synth.cast("1", "boolean") is True

    def test_integer(self):
        assert self.synth.cast("27", "integer") == 27

    def test_float_and_numeric(self):
        assert self.synth.cast("3.5", "float") == 3.5
        assert self.synth.cast("1337e0", "numeric") == 1337.0

    def test_uncastable_passes_through(self):
        assert self.synth.cast("twenty", "integer") == "twenty"
        assert self.synth.cast("abc", "float") == "abc"
        assert self.synth.cast("maybe", "boolean") == "maybe"

    def test_other_types_pass_through(self):
        assert self.synth.cast("[1, 2]", "array") == "[1, 2]"
        assert self.synth.cast("hello", "string") == "hello"
