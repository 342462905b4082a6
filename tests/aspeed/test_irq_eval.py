import pytest

from gpiosim.aspeed.irq_eval import evaluate_irq, trigger_code
from gpiosim.aspeed.registers import RegisterSet
from gpiosim.core.gpio_enums import InterruptTrigger


def make_regs(code: int, bit: int, high: bool) -> RegisterSet:
    mask = 1 << bit
    return RegisterSet(
        int_sens_0=mask if code & 1 else 0,
        int_sens_1=mask if code & 2 else 0,
        int_sens_2=mask if code & 4 else 0,
        data_value=mask if high else 0,
    )


def test_trigger_code_composes_sensitivity_bits():
    regs = make_regs(InterruptTrigger.LEVEL_HIGH, 9, False)
    assert trigger_code(regs, 9) == InterruptTrigger.LEVEL_HIGH
    assert trigger_code(regs, 8) == InterruptTrigger.FALLING_EDGE


@pytest.mark.parametrize(
    "code, prev_high, high, fires",
    [
        (InterruptTrigger.FALLING_EDGE, True, False, True),
        (InterruptTrigger.FALLING_EDGE, False, True, False),
        (InterruptTrigger.RISING_EDGE, False, True, True),
        (InterruptTrigger.RISING_EDGE, True, False, False),
        (InterruptTrigger.LEVEL_LOW, True, False, True),
        (InterruptTrigger.LEVEL_LOW, False, True, False),
        (InterruptTrigger.LEVEL_HIGH, False, True, True),
        (InterruptTrigger.LEVEL_HIGH, True, False, False),
        (InterruptTrigger.DUAL_EDGE, False, True, True),
        (InterruptTrigger.DUAL_EDGE, True, False, True),
        (7, False, True, True),
        (5, True, True, False),
    ],
)
def test_evaluate_irq(code, prev_high, high, fires):
    regs = make_regs(code, 3, high)

    assert evaluate_irq(regs, prev_high, 3) is fires
    assert regs.int_status == (0x8 if fires else 0)


def test_status_bit_persists():
    regs = make_regs(InterruptTrigger.RISING_EDGE, 0, True)
    regs.int_status = 0x1

    assert evaluate_irq(regs, True, 0) is False
    assert regs.int_status == 0x1


def test_only_the_evaluated_bit_is_latched():
    regs = make_regs(InterruptTrigger.RISING_EDGE, 4, True)
    regs.int_status = 0x80000000

    evaluate_irq(regs, False, 4)

    assert regs.int_status == 0x80000010
