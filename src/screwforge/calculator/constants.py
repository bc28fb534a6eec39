"""
Numerical constants for thread and fastener calculations.

Standard-derived constants carry their source (ISO, DIN, UTS); the rest
are modelling constants chosen so OpenCascade booleans stay robust.

MODIFICATION GUIDELINES:
- Never change ISO/DIN constants without updating the standard reference
- Modelling constants may be tuned, but keep them well below printing and
  machining tolerances
- Always include units in constant names (_MM, _DEG, _PERCENT)

Constants are grouped by category:
- ISO 68-1 / UTS: basic 60° thread profile
- Thread forms: ACME, metric trapezoidal, square, buttress
- Fastener heads and holes
- Modelling: boolean overlaps and numeric tolerances
- Validation thresholds
"""

# =============================================================================
# ISO 68-1 / UTS - Basic 60° Thread Profile
# =============================================================================

# Included flank angle of ISO metric and unified threads
V_THREAD_ANGLE_DEG: float = 60.0

# Minor diameter = major - ratio × pitch (2 × 5/8 × H, H = 0.866025 P)
V_THREAD_MINOR_DIAMETER_RATIO: float = 1.082532

# Crest flat width as a fraction of pitch (P/8)
V_THREAD_CREST_WIDTH_RATIO: float = 1.0 / 8.0

# Millimetres per inch, for unified (UTS) threads
MM_PER_INCH: float = 25.4

# =============================================================================
# Thread Forms
# =============================================================================

# ACME (ASME B1.5): 29° included angle, crest flat 0.3707 P, depth P/2
ACME_ANGLE_DEG: float = 29.0
ACME_CREST_WIDTH_RATIO: float = 0.3707

# Metric trapezoidal (ISO 2904): 30° included angle, crest flat 0.366 P
METRIC_TRAPEZOIDAL_ANGLE_DEG: float = 30.0
METRIC_TRAPEZOIDAL_CREST_WIDTH_RATIO: float = 0.366

# Square thread: vertical flanks, crest equals groove
SQUARE_CREST_WIDTH_RATIO: float = 0.5

# Buttress (ANSI B1.9 style): 7° pressure flank, 45° clearance flank
BUTTRESS_LEADING_FLANK_DEG: float = 7.0
BUTTRESS_TRAILING_FLANK_DEG: float = 45.0
BUTTRESS_CREST_WIDTH_RATIO: float = 1.0 / 8.0
BUTTRESS_DEPTH_RATIO: float = 0.6

# =============================================================================
# Fastener Heads and Holes
# =============================================================================

# Chamfer angle of hex bolt heads and hex nuts (DIN 931 / DIN 934)
HEX_CHAMFER_ANGLE_DEG: float = 30.0

# Hex nut chamfer flat as a fraction of width across flats (DIN 934)
HEX_NUT_FLAT_DIAMETER_RATIO: float = 0.95

# Included angle of metric countersunk heads (ISO 10642 / ISO 2009)
COUNTERSINK_ANGLE_DEG: float = 90.0

# Included angle at the bottom of a drilled hex socket
SOCKET_BOTTOM_ANGLE_DEG: float = 120.0

# Socket head cap top chamfer as a fraction of the thread diameter (DIN 912)
SOCKET_HEAD_CHAMFER_RATIO: float = 0.1

# Slotted countersunk slot proportions relative to the head diameter
SLOT_WIDTH_RATIO: float = 0.14
SLOT_DEPTH_RATIO: float = 0.13

# Phillips recess cone angles (ISO 4757): upper cone against the axis,
# lower cone against the bottom face
PHILLIPS_TOP_ANGLE_DEG: float = 26.5
PHILLIPS_BOTTOM_ANGLE_DEG: float = 28.0

# Hexalobular (Torx) socket proportions relative to the outer diameter A
# (ISO 10664): lobe radius, lobe centre distance, inner fillet radius
TORX_LOBE_RADIUS_RATIO: float = 0.1
TORX_LOBE_CENTER_RATIO: float = 0.4
TORX_INNER_FILLET_RATIO: float = 0.175

# Included angle of the cone under a Torx socket
TORX_BOTTOM_ANGLE_DEG: float = 90.0

# Flange face angle of flanged hex nuts (DIN 6923)
FLANGE_ANGLE_DEG: float = 20.0

# Head recesses extend this far above the hole entry so they cut cleanly
HEAD_CLEARANCE_MM: float = 100.0

# =============================================================================
# Modelling
# =============================================================================

# Thread profiles reach this far below the minor diameter so the swept
# thread overlaps the core cylinder instead of touching it
THREAD_ROOT_INSET_MM: float = 0.01

# Extra core cylinder radius; zero-overlap fuses yield disjoint solids
CORE_OVERLAP_MM: float = 0.01

# Cutters (sockets, slots) start this far outside the face they cut
CUTTER_OVERSHOOT_MM: float = 0.01

# Two knuckle arcs are treated as tangent within this distance
KNUCKLE_TANGENCY_EPSILON: float = 1e-10

# Slack when comparing a pitch against the profile's minimum pitch
PITCH_COMPARISON_EPSILON_MM: float = 1e-9

# Angular step used when a thread profile arc is flattened to points
PROFILE_ARC_RESOLUTION_DEG: float = 10.0

# Lead-in cutters extend past the chamfer by this fraction of its size
LEAD_IN_CUTTER_EXTENSION: float = 0.1

# =============================================================================
# Validation Thresholds
# =============================================================================

# Warn when pitch is within this margin of the profile's minimum pitch
MINIMUM_PITCH_MARGIN_PERCENT: float = 5.0

# Threads shallower than this are hard to print or machine
SHALLOW_THREAD_DEPTH_MM: float = 0.1

# Knuckle arcs closer than this to tangency produce sliver flanks
KNUCKLE_NEAR_TANGENT_MM: float = 1e-3
