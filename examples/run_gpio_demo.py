import argparse
import logging
import sys
from pathlib import Path

# Ensure local repo package is used even if another "gpiosim" is on PYTHONPATH.
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from gpiosim import InterruptController, create_controller, list_available_controllers
from gpiosim.aspeed.consts import PRIMARY_LAYOUT, SECONDARY_LAYOUT
from gpiosim.aspeed.registers import RegisterKind


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Toggle a pin of an ASPEED GPIO controller.")
    parser.add_argument(
        "--controller",
        default="aspeed.gpio-ast2500",
        choices=list_available_controllers(),
        help="Controller model to instantiate",
    )
    parser.add_argument(
        "--pin",
        default="gpioA0",
        help="Pin name to toggle",
    )
    parser.add_argument(
        "--toggles",
        type=int,
        default=4,
        help="Number of level changes to drive",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    return parser.parse_args()


class PrintingCpu:
    def handle_interrupt(self, event) -> None:
        print(f"  summary IRQ from {event.source.name}")


def main() -> None:
    args = parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    gpio = create_controller(args.controller)
    ctrl = InterruptController()
    ctrl.attach_cpu(PrintingCpu())
    gpio.attach_interrupt_controller(ctrl)

    if args.pin not in gpio.pin_names():
        print(f"{args.controller} has no pin {args.pin}")
        return
    index = gpio.pin_names().index(args.pin)
    pin = gpio.pins[index]
    gpio.outputs[index].connect(lambda level: print(f"  {args.pin} irq line -> {level}"))

    # Output direction, dual-edge trigger, interrupt enabled
    mask = 1 << pin.bit
    if gpio.variant.is_secondary(pin.set_index):
        layout, bank_index = SECONDARY_LAYOUT, pin.set_index - len(gpio.variant.sets)
    else:
        layout, bank_index = PRIMARY_LAYOUT, pin.set_index
    for kind in (RegisterKind.DIRECTION, RegisterKind.INT_SENS_2, RegisterKind.INT_ENABLE):
        gpio.write(layout[kind][bank_index], 4, mask)

    level = False
    for _ in range(args.toggles):
        level = not level
        print(f"drive {args.pin} {'high' if level else 'low'}")
        gpio.set_pin(args.pin, level)
        raised = len(ctrl.drain())
        print(f"  committed level: {gpio.get_pin(args.pin)}, summary IRQs: {raised}")


if __name__ == "__main__":
    main()
