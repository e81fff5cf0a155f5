from dataclasses import dataclass


@dataclass(frozen=True)
class Platform:
    name: str
    description: str
    opcode: int     # native no-op encoding, not used by the fill


PLATFORMS = (
    Platform('x86', 'Intel x86 / x86-64', 0x90),
    Platform('arm', 'ARM (A32)', 0xE1A00000),
    Platform('thumb', 'ARM Thumb / Cortex-M', 0xBF00),
    Platform('aarch64', 'ARM 64-bit', 0xD503201F),
    Platform('riscv', 'RISC-V (RV32/RV64)', 0x00000013),
    Platform('mips', 'MIPS', 0x00000000),
)

DEFAULT_PLATFORM = 'x86'


def platform_names():
    return [p.name for p in PLATFORMS]


def find_platform(name):
    for p in PLATFORMS:
        if p.name == name:
            return p
    raise KeyError(name)
