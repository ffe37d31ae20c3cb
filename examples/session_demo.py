"""
Demonstration of an editing session.

This script walks through what a grid UI does on top of gridcalc: it types
values and formulas into cells, fill-drags a formula down a column, and
reads the display grid back. It then compares the result with the
formualizer reference engine and shows what a circular reference looks like.
"""

import logging

from gridcalc import FormualizerExecutor, Range, Session, SetCell, Sheet
from gridcalc.utils import visualize_dependencies


def main():
    """Build a small sales sheet through a Session."""

    logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    print("=" * 70)
    print("gridcalc Session Demo")
    print("=" * 70)
    print()

    session = Session(Sheet("Sales", rows=20, cols=5))

    # Type the data the way a user would: select, edit, enter
    rows = [
        ("Widget A", "10", "5"),
        ("Widget B", "15", "3"),
        ("Widget C", "20", "2"),
    ]
    print("Step 1: Typing product rows...")
    for r, values in enumerate(rows):
        for c, text in enumerate(values):
            session.select((r, c))
            session.edit(text)
    session.select("D1")
    session.edit("=B1*C1")
    session.enter()
    print("✓ Entered", len(rows), "rows and a total formula in D1")
    print()

    # Fill-drag the total down to the last product
    print("Step 2: Fill-dragging D1 down to D3...")
    session.begin_drag("D1")
    session.drag_to("D3")
    for write in session.end_drag():
        print(f"  {write.address} = {write.content}")
    print()

    session.select("D4")
    session.edit("=D1+D2+D3")
    session.enter()

    rect = Range.from_a1("A1:D4")
    print("Step 3: Display grid:")
    print("-" * 70)
    print(session.to_frame(rect))
    print("-" * 70)
    print()

    print("Step 4: Dependencies of D4:")
    print(visualize_dependencies(session.store, "D4"))
    print()

    # Replay the same content into formualizer and compare
    print("Step 5: Checking against formualizer...")
    reference = FormualizerExecutor()
    reference.execute([
        SetCell(address.row, address.col, content)
        for address, content in session.store.items()
    ])
    print("  gridcalc:   ", session.display("D4"))
    print("  formualizer:", reference.read_sheet(Range.from_a1("D4"))[0][0])
    print()

    print("Step 6: Introducing a cycle (B1 = D4)...")
    session.select("B1")
    session.edit("=D4")
    session.enter()
    print("  D4 now displays", session.display("D4"))
    print()

    print("=" * 70)
    print("Demo complete!")
    print("=" * 70)


if __name__ == "__main__":
    main()
