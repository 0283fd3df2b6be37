"""
Demonstration of the Paired Binary Hierarchy

Walks one base pattern up through several doubled widths and shows
membership, decomposition, composition and random sampling.
"""

from paired_binary import InitialPattern, PairedEntity, Propagator
from paired_binary.errors import HierarchyError


def print_section(title):
    """Print a formatted section header."""
    print("\n" + "=" * 70)
    print(f"  {title}")
    print("=" * 70)


def demonstrate_pairs():
    print_section("Paired Entities")
    for x in (0, 5, 12):
        pe = PairedEntity.from_value(x, 4)
        print(f"  {x:>3} → ({pe.x:04b}, {pe.x_prime:04b})")


def demonstrate_propagation(propagator):
    print_section("Propagation")
    for n in propagator.levels(48):
        print(f"  S_{n:<3} level {propagator.level_of(n)}: {propagator.count_members(n)} members")

    members = list(propagator.iter_members(6))
    print(f"\n  S_6 = {members}")


def demonstrate_round_trip(propagator):
    print_section("Decompose / Compose")
    x = propagator.generate_random_member(48, seed_offset=1)
    components = propagator.decompose_to_base(x, 48)
    value, n_bits = propagator.compose_from_base(components)
    print(f"  random member of S_48: {x}")
    print(f"  components: {components}")
    print(f"  recomposed: {value} at {n_bits} bits ({'✓' if value == x else '✗'})")


def demonstrate_errors(propagator):
    print_section("Errors")
    for call in (lambda: propagator.is_member(5, 5),
                 lambda: propagator.compose_from_base([0, 1, 2]),
                 lambda: propagator.decompose_to_base(0b011000, 6)):
        try:
            call()
        except HierarchyError as e:
            print(f"  {e.kind}: {e.message}")


def main():
    propagator = Propagator(InitialPattern.new(3, [0, 1, 2]))
    demonstrate_pairs()
    demonstrate_propagation(propagator)
    demonstrate_round_trip(propagator)
    demonstrate_errors(propagator)


if __name__ == "__main__":
    main()
