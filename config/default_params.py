"""Default parameters for the padel club financial model.

Figures are taken from the club's Financial Summary document. All amounts are
in Indonesian Rupiah (IDR).
"""

FACILITY_NAME = "Athletico Nusantara Pro"

# Courts: units and price per court-hour (normal / discounted)
COURT_TYPES = [
    {'court_id': 'SIDE', 'unit_count': 6, 'price_normal': 382_500, 'price_discount': 292_500},
    {'court_id': 'CENTER', 'unit_count': 2, 'price_normal': 472_500, 'price_discount': 382_500},
    {'court_id': 'STADIUM', 'unit_count': 1, 'price_normal': 675_000, 'price_discount': 585_000},
]

DEFAULT_DAILY_HOURS = 8.0

# Slider range for sold hours per court per day
HOURS_MIN = 0.0
HOURS_MAX = 16.0
HOURS_STEP = 0.5

# Non-court revenue defaults (monthly)
ANCILLARY_DEFAULTS = {
    'food_and_beverage': 300_000_000,  # Cafeteria (150M) + Restaurant (150M)
    'fitness': 25_000_000,
    'pro_shop': 45_000_000,
    'sponsorship': 135_000_000,
}

# Operational costs
TOTAL_OPEX_MONTHLY = 437_708_125
DEPRECIATION_RESERVE_ITEM = 'Depreciation Reserve'

# OPEX breakdown (monthly, rounded in the source document)
OPEX_SCHEDULE = [
    ('Land Rental', 169_600_000),
    (DEPRECIATION_RESERVE_ITEM, 105_400_000),
    ('Salaries (17 staff)', 84_300_000),
    ('Electricity', 23_200_000),
    ('Hygiene & Cleanliness', 13_900_000),
    ('Maintenance', 11_600_000),
    ('Management Fee (4%)', 9_300_000),
    ('Customer Experience', 7_000_000),
    ('Marketing & Campaign', 4_600_000),
    ('Court Supplies', 4_600_000),
    ('Other Supplies', 2_300_000),
    ('Phone & Internet', 1_700_000),
]

# CAPEX breakdown
CAPEX_SCHEDULE = [
    ('Building & Structure', 21_190_000_000),
    ('Land Rental (6,000m², 3 tahun)', 5_400_000_000),
    ('Padel Courts (9 unit @ Rp 250jt)', 2_250_000_000),
    ('Pickle Ball Courts (2 unit)', 100_000_000),
    ('Gym Equipment', 500_000_000),
    ('Other Equipment', 250_000_000),
    ('Legal & Administration', 310_000_000),
]

# Reference scenarios from the Financial Summary (monthly)
REFERENCE_SCENARIOS = [
    {'label': 'Scenario A (8h)', 'monthly_revenue': 1_445_000_000, 'monthly_ebitda': 1_112_000_000},
    {'label': 'Scenario F (6h)', 'monthly_revenue': 914_000_000, 'monthly_ebitda': 582_000_000},
]

# Chart colours per revenue category
CATEGORY_COLORS = {
    'SIDE': '#0284c7',
    'CENTER': '#0ea5e9',
    'STADIUM': '#38bdf8',
    'food_and_beverage': '#f59e0b',
    'fitness': '#10b981',
    'pro_shop': '#8b5cf6',
    'sponsorship': '#ec4899',
}
