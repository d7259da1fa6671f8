"""Example value synthesis and casting of inline examples.

Generated values only have to look plausible in rendered documentation,
so they are random by default. Pass a seeded ``Faker`` (or use
``ExampleValueSynthesizer.seeded``) to get repeatable output.
"""

import logging
from typing import Any, Callable

from faker import Faker

logger = logging.getLogger("api_doc_extractor.generator.examples")

# Numeric params accept all of these, so the docs show a mix of them.
NUMERIC_EXAMPLES = ("42", 1337, 0x539, 0o2471, 0b10100111001, 1337e0, "02471", "1337e0", 9.1)

TRUE_STRINGS = {"true", "1", "yes", "on"}
FALSE_STRINGS = {"false", "0", "no", "off"}

Generator = Callable[[Faker], Any]

DEFAULT_GENERATORS: dict[str, Generator] = {
    "integer": lambda fake: fake.random_int(min=0, max=99999),
    "numeric": lambda fake: fake.random_element(NUMERIC_EXAMPLES),
    "float": lambda fake: fake.pyfloat(positive=True),
    "boolean": lambda fake: fake.pybool(),
    "string": lambda fake: fake.word(),
    "array": lambda fake: "[]",
    "json": lambda fake: "{}",
    "image": lambda fake: fake.image_url(),
}


class ExampleValueSynthesizer:
    """Produces a representative example value per canonical type."""

    def __init__(self, fake: Faker | None = None):
        self.fake = fake if fake is not None else Faker()
        self._generators = dict(DEFAULT_GENERATORS)

    @classmethod
    def seeded(cls, seed: int | None) -> "ExampleValueSynthesizer":
        fake = Faker()
        if seed is not None:
            fake.seed_instance(seed)
        return cls(fake)

    def register(self, type_name: str, generator: Generator) -> None:
        """Install (or replace) the generator used for ``type_name``."""
        self._generators[type_name] = generator

    def synthesize(self, type_name: str) -> Any:
        """Return an example for ``type_name``; unknown types get a string."""
        generator = self._generators.get(type_name, self._generators["string"])
        return generator(self.fake)

    def cast(self, value: str, type_name: str) -> Any:
        """Cast inline example text to ``type_name``.

        Text the type cannot represent is returned unchanged.
        """
        try:
            if type_name == "integer":
                return int(value)
            if type_name in ("numeric", "float"):
                return float(value)
        except ValueError:
            logger.debug(f"Example {value!r} is not a valid {type_name}, keeping text")
            return value

        if type_name == "boolean":
            lowered = value.strip().lower()
            # bool("false") would be True
            if lowered in FALSE_STRINGS:
                return False
            if lowered in TRUE_STRINGS:
                return True
            logger.debug(f"Example {value!r} is not a valid boolean, keeping text")
        return value
