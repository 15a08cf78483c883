"""Seed reference costs for the Skyara feasibility engine.

Amounts are 2025 averages for a standard R+2 house on a 100 m² parcel in
Morocco, in DH, quoted by local contractors per 100 m² of terrain.
"""

from skyara.data.reference_costs import (
    DetailedCostReference,
    FinishingReference,
    FoundationReference,
    GrossWorksReference,
    StoreyReference,
    TerraceReference,
)

DEFAULT_COST_REFERENCE = DetailedCostReference(
    version="2025.1",
    reference_surface=100.0,
    # 50 060 DH
    foundation=FoundationReference(
        labor=12_000.0,  # 120 DH/m²
        stone=3_000.0,
        gravel=3_500.0,
        sand=6_000.0,
        cement=12_300.0,  # 150 bags CPJ45
        rebar=10_560.0,
        misc=2_700.0,  # tie wire, nails, PVC drains
    ),
    # 92 460 + 96 400 DH
    ground_floor=StoreyReference(
        gross_works=GrossWorksReference(
            labor=24_000.0,  # 240 DH/m²
            bricks=12_320.0,  # 4200 units, 12 & 8
            gravel=3_500.0,
            sand=6_000.0,
            cement=16_080.0,  # 200 bags CPJ35 & CPJ45
            rebar=10_560.0,  # 12 quintals, 6/10/12 mm
            flooring_base=10_000.0,  # hourdis slab
            utilities=10_000.0,  # embedded water & electricity
        ),
        finishing=FinishingReference(
            plaster=10_400.0,
            tiling=19_500.0,
            marble=11_000.0,
            paint=8_000.0,
            aluminum=9_500.0,
            sanitary=5_000.0,
            wood=8_000.0,
            ironwork=10_000.0,
            kitchen=15_000.0,
        ),
    ),
    # 96 600 + 99 200 DH
    upper_floor=StoreyReference(
        gross_works=GrossWorksReference(
            labor=24_000.0,
            bricks=14_000.0,
            gravel=3_500.0,
            sand=6_000.0,
            cement=15_540.0,
            rebar=10_560.0,
            flooring_base=11_000.0,
            utilities=12_000.0,
        ),
        finishing=FinishingReference(
            plaster=11_700.0,  # 90 m²
            tiling=19_500.0,
            marble=11_000.0,
            paint=8_000.0,
            aluminum=14_000.0,  # 5 windows
            sanitary=5_000.0,
            wood=10_000.0,  # 5 doors
            ironwork=5_000.0,
            kitchen=15_000.0,
        ),
    ),
    # 31 380 + 27 000 DH
    terrace=TerraceReference(
        labor=10_000.0,  # 100 DH/m²
        bricks=5_120.0,  # parapet
        cement=4_100.0,  # 50 bags
        rebar=6_160.0,  # 7 quintals
        sand=6_000.0,
        tiling=16_500.0,  # 110 m²
        paint=8_000.0,  # facade and courtyard
        ironwork=2_500.0,
    ),
    basement_multiplier=1.2,
    connection_fees_fixed=15_000.0,  # ONEE/Lydec water & power hookup
)
