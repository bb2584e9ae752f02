import doctest

import colorterp
import colorterp.colors
from colorterp.conversions import wrapper
from colorterp.gradients import fractions
import pytest


@pytest.mark.parametrize("module", [colorterp, colorterp.colors, wrapper, fractions])
def test_docstring_examples(module):
    result = doctest.testmod(module)
    assert result.attempted > 0
    assert result.failed == 0
