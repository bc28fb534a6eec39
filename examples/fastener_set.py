"""
Generate a matching M6 fastener set plus a two-start lead screw.

Creates a socket head cap screw, hex nut, washer, a test block with a
threaded hole and a counterbored clearance hole, and a Tr16x4 lead screw.
All parts are written as STEP files for visual inspection of the fit.
"""

import logging
from pathlib import Path

from build123d import Box, Align, Plane, Pos, export_step

from screwforge.calculator import LeadInEnds, iso_metric, metric_trapezoidal, validate_thread
from screwforge.core import (
    ScrewGeometry,
    ThreadedHoleGeometry,
    hex_nut,
    hex_socket_head_cap,
    iso7089,
)
from screwforge.core.booleans import cut

logging.basicConfig(level=logging.INFO, format="%(message)s")

OUTPUT = Path("fastener_set")
OUTPUT.mkdir(exist_ok=True)

# Printed parts need a little play
TOLERANCE = 0.2

print("=" * 70)
print("M6 FASTENER SET")
print("=" * 70)
print()

m6 = iso_metric("M6")
print(f"Thread: {m6.describe()}")
print(f"  Pitch:          {m6.pitch:.3f} mm")
print(f"  Minor diameter: {m6.minor_diameter:.3f} mm")
print(f"  Thread depth:   {m6.depth:.3f} mm")
print()

bolt = hex_socket_head_cap("M6", 20.0, tolerance=TOLERANCE)
nut = hex_nut("M6", tolerance=TOLERANCE)
washer = iso7089("M6", tolerance=TOLERANCE)

bolt.export_step(str(OUTPUT / "m6x20_socket_cap.step"))
nut.export_step(str(OUTPUT / "m6_nut.step"))
washer.export_step(str(OUTPUT / "m6_washer.step"))

# Test block: threaded hole on the left, clearance hole for the bolt on the right
block = Box(40, 20, 15, align=(Align.CENTER, Align.CENTER, Align.MIN))

tapped = ThreadedHoleGeometry(m6, 15.0, LeadInEnds.both(), tolerance=TOLERANCE).build()
clearance = bolt.clearance_hole(depth=15.0 - 6.0, recessed_head=True).build()

# Cutters run from z=0 towards +z; the clearance hole is flipped to open at the top
block = cut(block, Pos(-10, 0, 0) * tapped)
block = cut(block, Pos(10, 0, 15) * clearance.mirror(Plane.XY))
export_step(block, str(OUTPUT / "test_block.step"))
print(f"Test block volume: {block.volume:.1f} mm³")
print()

print("=" * 70)
print("Tr16x4 TWO-START LEAD SCREW")
print("=" * 70)
print()

lead_screw = metric_trapezoidal(16.0, 4.0, starts=2)
result = validate_thread(lead_screw, length=60.0, lead_ins=LeadInEnds.both())
for msg in result.messages:
    print(f"  [{msg.severity.value.upper()}] {msg.message}")

screw = ScrewGeometry(lead_screw, 60.0, LeadInEnds.both(), tolerance=TOLERANCE)
screw.export_step(str(OUTPUT / "tr16x4_lead_screw.step"))

print()
print(f"Parts written to {OUTPUT}/")
