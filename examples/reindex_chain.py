"""
Example: Reindexing a chain Bayes net.

P(A | B) P(B | C, D) P(C, D) is relabeled twice: a reversed ordering is
rejected, a shifted one is applied to every conditional in place.
"""

from elimcore import BayesNet, Conditional, OrderingInvariantError, Permutation


def main():
    # Variables A=0, B=1, C=2, D=3 eliminated in index order
    net = BayesNet()
    net.push_back(Conditional(0, 1))
    net.push_back(Conditional(1, 2, 3))
    net.push_back(Conditional.from_range([2, 3], 2))  # root clique P(C, D)

    net.print("Original")

    # Reversing the order would put every parent before its frontal
    reverse = Permutation.from_ordering([3, 2, 1, 0])
    try:
        net.permute_with_inverse(reverse.inverse())
    except OrderingInvariantError as e:
        print(f"\nRejected: {e}")

    # Shifting everything up by one keeps frontals ahead of parents
    shift = Permutation([1, 2, 3, 4, 0])
    net.permute_with_inverse(shift)
    net.print("\nShifted")

    # Separator-only update on one conditional: its frontal 2 is a fixed point
    swap = Permutation.from_mapping({3: 4, 4: 3}, size=5)
    changed = net[1].permute_separator_with_inverse(swap)
    print(f"\nSeparator changed: {changed}")
    net[1].print("Swapped")


if __name__ == "__main__":
    main()
