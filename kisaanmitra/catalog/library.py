"""
Static cultivation library.

Fixed at import time; there is no API to edit it. Journeys store step ids
only, so changing an entry here never rewrites an existing journey.
"""
from kisaanmitra.catalog.models import (
    CropDefinition,
    Season,
    StepCategory,
    WaterRequirement,
    WorkflowStep,
)

C = StepCategory


WHEAT = CropDefinition(
    id="c1",
    name="Wheat (Grade A)",
    category="Grains",
    season=Season.rabi,
    water_requirement=WaterRequirement.medium,
    water_instruction="First irrigation at 20-25 DAS (CRI stage). Total 4-6 irrigations.",
    soil_suitability=("Alluvial", "Black"),
    spacing="22.5 cm x 10 cm",
    fun_fact="Wheat is the global staple that defined modern agriculture.",
    subsidies=("PM-Kisan", "MSP Support"),
    care_tips=(
        "Maintain 21 days for CRI (Crown Root Initiation) stage",
        "Monitor for Yellow Rust disease during cold spells",
        "Apply nitrogen in three split doses for better grain filling",
    ),
    workflow=(
        WorkflowStep(
            id="s1",
            title="Land Preparation & Soil Testing",
            description=(
                "Deep ploughing (15-20cm), leveling, and collecting soil samples for pH and "
                "nutrient analysis. Remove weeds and previous crop residue. Test soil for "
                "nitrogen, phosphorus, potassium levels."
            ),
            icon="Tractor",
            category=C.preparation,
            points=100,
            eco_points=50,
            estimated_days=5,
            tools=("Plough", "Leveler", "Soil Testing Kit"),
            warnings=("Ensure proper drainage to prevent waterlogging",),
            tutorial_video="https://www.youtube.com/embed/Lp5vfJ9N7MQ",
        ),
        WorkflowStep(
            id="s2",
            title="Seed Selection & Treatment",
            description=(
                "Select certified seeds (HD-2967, PBW-343) at 100kg/ha rate. Treat seeds with "
                "bio-fungicides like Trichoderma viride @ 4g/kg to protect from soil-borne "
                "diseases. Sun-dry treated seeds for 2 hours."
            ),
            icon="Sprout",
            category=C.sowing,
            points=120,
            eco_points=80,
            estimated_days=2,
            tools=("Bio-fungicide", "Mixing Tray", "Weighing Scale"),
            tutorial_video="https://www.youtube.com/embed/qKyqK_rE_eI",
        ),
        WorkflowStep(
            id="s3",
            title="Sowing & Spacing",
            description=(
                "Sow seeds at 5cm depth using seed drill with row spacing of 20-22.5cm. Optimal "
                "sowing time: mid-October to mid-November. Ensure uniform seed distribution at "
                "100kg/hectare."
            ),
            icon="Sprout",
            category=C.sowing,
            points=200,
            eco_points=60,
            estimated_days=3,
            tools=("Seed Drill", "Rope Line"),
            warnings=("Late sowing reduces yield by 25-30 kg/day",),
            tutorial_video="https://www.youtube.com/embed/4X_oJlQTPIk",
        ),
        WorkflowStep(
            id="s4",
            title="Harvesting & Post-Harvest",
            description=(
                "Harvest when grain moisture is 12-14% using combine harvester. Thresh within "
                "24 hours. Dry grains to 10-12% moisture for storage. Store in moisture-proof "
                "containers."
            ),
            icon="Wheat",
            category=C.harvest,
            points=250,
            eco_points=150,
            estimated_days=5,
            tools=("Combine Harvester", "Thresher", "Storage Bins"),
            warnings=("Delayed harvest causes grain shattering losses",),
            tutorial_video="https://www.youtube.com/embed/6U2wL7L9a_c",
        ),
    ),
)


BASMATI_RICE = CropDefinition(
    id="c2",
    name="Basmati Rice",
    category="Grains",
    season=Season.kharif,
    water_requirement=WaterRequirement.high,
    water_instruction="Keep field moist/flooded (2-5 cm water level) until maturity.",
    soil_suitability=("Alluvial", "Clayey"),
    spacing="20 cm x 20 cm",
    fun_fact="The long grains and unique aroma are global exports.",
    subsidies=("Export Incentive",),
    care_tips=(
        "Keep field flooded (2-5 cm) to suppress weed growth",
        "Monitor for stem borer and leaf folder pests",
        "Use organic manure during puddling for aroma enhancement",
    ),
    workflow=(
        WorkflowStep(
            id="b1",
            title="Nursery Bed Preparation",
            description=(
                "Prepare raised nursery beds 1.25m wide with fine tilth. Apply 20kg FYM and 50g "
                "each of N, P, K per 100m2. Ensure proper drainage."
            ),
            icon="Tractor",
            category=C.preparation,
            points=100,
            eco_points=50,
            estimated_days=3,
            tools=("Rake", "FYM", "Leveling Board"),
            warnings=("Avoid low-lying waterlogged areas for nursery",),
        ),
        WorkflowStep(
            id="b2",
            title="Seed Selection & Treatment",
            description=(
                "Use certified Basmati seeds (Pusa 1121, 1509) at 30kg/ha. Soak in salt water to "
                "remove unfilled grains. Treat with Trichoderma @ 5g/kg."
            ),
            icon="Sprout",
            category=C.sowing,
            points=120,
            eco_points=80,
            estimated_days=2,
            tools=("Seed Container", "Fungicide", "Salt"),
        ),
        WorkflowStep(
            id="b3",
            title="Transplantation",
            description=(
                "Transplant 25-30 day old seedlings at 2-3 seedlings per hill with 20x15cm "
                "spacing. Complete within 2-3 days of uprooting."
            ),
            icon="Sprout",
            category=C.sowing,
            points=250,
            eco_points=120,
            estimated_days=5,
            tools=("Transplanter", "Rope Line"),
            warnings=("Delayed transplanting reduces yield by 50kg/ha per day",),
        ),
        WorkflowStep(
            id="b4",
            title="Water Management & Initial Care",
            description=(
                "Maintain 5cm standing water for first 2 weeks, then alternate wetting-drying. "
                "First weeding at 20 DAT."
            ),
            icon="Droplets",
            category=C.maintenance,
            points=160,
            eco_points=200,
            estimated_days=20,
            tools=("Weeder", "Urea", "Water Channel"),
        ),
        WorkflowStep(
            id="b5",
            title="Pest & Disease Monitoring",
            description=(
                "Scout for stem borer, leaf folder, BPH weekly. Install pheromone traps at 5/ha. "
                "Check for blast and sheath blight."
            ),
            icon="ShieldCheck",
            category=C.protection,
            points=140,
            eco_points=100,
            estimated_days=30,
            tools=("Pheromone Traps", "Sprayer", "Fungicide"),
            warnings=("Avoid pesticide application during flowering",),
        ),
        WorkflowStep(
            id="b6",
            title="Harvesting & Post-Harvest",
            description=(
                "Harvest at 20-22% grain moisture. Thresh immediately to prevent discoloration. "
                "Sun-dry to 14% moisture in thin layers."
            ),
            icon="Wheat",
            category=C.harvest,
            points=300,
            eco_points=150,
            estimated_days=5,
            tools=("Combine Harvester", "Tarpaulin", "Gunny Bags"),
            warnings=("Over-drying causes grain cracking and quality loss",),
        ),
    ),
)


TOMATO = CropDefinition(
    id="c5",
    name="Tomato",
    category="Vegetables",
    season=Season.rabi,
    water_requirement=WaterRequirement.medium,
    water_instruction="Drip irrigation every 2-3 days; avoid wetting the foliage.",
    soil_suitability=("Sandy Loam", "Red", "Black"),
    spacing="60 cm x 45 cm",
    fun_fact="Tomatoes were once grown in Europe purely as ornamental plants.",
    care_tips=(
        "Stake plants early to keep fruit off the soil",
        "Spray calcium nitrate at flowering against blossom end rot",
    ),
    workflow=(
        WorkflowStep(
            id="tm1",
            title="Nursery Preparation",
            description=(
                "Prepare raised beds 1m wide with well-decomposed FYM. Treat soil with "
                "Trichoderma. Sow seeds in lines 5cm apart at 0.5cm depth."
            ),
            icon="Sprout",
            category=C.preparation,
            points=100,
            eco_points=60,
            estimated_days=5,
            tools=("Raised Bed", "Trichoderma", "Shade Net"),
        ),
        WorkflowStep(
            id="tm2",
            title="Transplanting",
            description=(
                "Transplant in evening at 60x45cm spacing. Water immediately after "
                "transplanting. Stake support if indeterminate variety."
            ),
            icon="Sprout",
            category=C.sowing,
            points=180,
            eco_points=80,
            estimated_days=3,
            tools=("Transplanter", "Stakes", "Twine"),
            warnings=("Avoid mid-day transplanting",),
        ),
        WorkflowStep(
            id="tm3",
            title="Pest & Disease Management",
            description=(
                "Scout for whitefly, fruit borer, leaf miner weekly. Check for early/late "
                "blight and bacterial wilt."
            ),
            icon="ShieldCheck",
            category=C.protection,
            points=160,
            eco_points=100,
            estimated_days=45,
            tools=("Yellow Traps", "Sprayer", "Fungicide"),
            warnings=("Remove and destroy infected plants",),
        ),
        WorkflowStep(
            id="tm4",
            title="First Harvest",
            description=(
                "Start harvest at breaker/turning stage (45-50 DAT) for distant markets. Pick "
                "every 3-4 days."
            ),
            icon="Wheat",
            category=C.harvest,
            points=200,
            eco_points=100,
            estimated_days=5,
            tools=("Harvesting Crate", "Gloves"),
        ),
        WorkflowStep(
            id="tm5",
            title="Grading & Storage",
            description=(
                "Grade by size and color. Store at 12-15C for ripe, 20C for green tomatoes. "
                "Avoid refrigeration below 10C."
            ),
            icon="Check",
            category=C.post_harvest,
            points=180,
            eco_points=120,
            estimated_days=60,
            tools=("Grading Table", "Crates"),
            warnings=("Cold injury occurs below 10C",),
        ),
    ),
)


MUSTARD = CropDefinition(
    id="c8",
    name="Mustard",
    category="Oilseeds",
    season=Season.rabi,
    water_requirement=WaterRequirement.low,
    water_instruction="Two irrigations: at branching and at pod filling.",
    soil_suitability=("Loamy", "Sandy Loam", "Alluvial"),
    spacing="30 cm x 10 cm",
    fun_fact="A single mustard plant can produce thousands of seeds.",
    workflow=(
        WorkflowStep(
            id="m1",
            title="Field Preparation",
            description="Plough twice and plank to get a fine, firm seedbed that holds moisture.",
            icon="Tractor",
            category=C.preparation,
            points=90,
            eco_points=60,
            estimated_days=3,
            tools=("Plough", "Planker"),
        ),
        WorkflowStep(
            id="m2",
            title="Line Sowing",
            description="Sow 5kg seed/ha in lines 30cm apart at 2-3cm depth in October.",
            icon="Sprout",
            category=C.sowing,
            points=140,
            eco_points=70,
            estimated_days=2,
            tools=("Seed Drill",),
        ),
        WorkflowStep(
            id="m3",
            title="Aphid Watch",
            description="Inspect plants twice a week for aphid colonies on the flowering tips.",
            icon="ShieldCheck",
            category=C.protection,
            points=120,
            eco_points=110,
            estimated_days=30,
            tools=("Yellow Traps", "Neem Oil"),
        ),
        WorkflowStep(
            id="m4",
            title="Harvest & Threshing",
            description="Harvest when 75% of pods turn yellow; dry the bundles before threshing.",
            icon="Wheat",
            category=C.harvest,
            points=220,
            eco_points=100,
            estimated_days=4,
            tools=("Sickle", "Tarpaulin"),
            warnings=("Late harvest shatters pods",),
        ),
    ),
)


COTTON = CropDefinition(
    id="c3",
    name="Cotton (Bt)",
    category="Cash Crops",
    season=Season.kharif,
    water_requirement=WaterRequirement.medium,
    water_instruction="4-6 irrigations depending on rainfall. Critical at flowering.",
    soil_suitability=("Black", "Alluvial", "Red"),
    spacing="90 cm x 60 cm",
    fun_fact="India is the largest producer of cotton in the world.",
    subsidies=("Cotton Corporation Support", "MSP"),
    care_tips=(
        "Deep ploughing to control soil-borne pests",
        "Square formation stage is critical for irrigation",
        "Control whitefly and jassids for fiber quality",
    ),
    workflow=(
        WorkflowStep(
            id="ct1", title="Field Preparation", icon="Tractor", category=C.preparation,
            description=(
                "Deep summer ploughing (30cm) to expose soil to sun. Apply 10 tons FYM/ha. "
                "Form beds or ridges at 90-120cm spacing depending on variety."
            ),
            points=100, eco_points=60, estimated_days=5,
            tools=("Plough", "Ridger", "FYM"),
            tutorial_video="https://www.youtube.com/embed/0fH_V9QJ_Mw",
        ),
        WorkflowStep(
            id="ct2", title="Seed Selection & Treatment", icon="Sprout", category=C.sowing,
            description=(
                "Use certified Bt cotton seeds (Bollgard II). Treat with Imidacloprid @ 5ml/kg "
                "for sucking pest protection. Maintain 2.5kg seeds per hectare."
            ),
            points=120, eco_points=80, estimated_days=1,
            tools=("Seed Treating Drum", "Imidacloprid"),
            tutorial_video="https://www.youtube.com/embed/XnJKZq9J1bs",
        ),
        WorkflowStep(
            id="ct3", title="Sowing", icon="Sprout", category=C.sowing,
            description=(
                "Sow on ridges at 90x60cm spacing with 3-4cm depth. Optimal time: June-July "
                "after pre-monsoon showers. Use dibbling method for precise placement."
            ),
            points=180, eco_points=70, estimated_days=3,
            tools=("Dibbler", "Planting Rope"),
            warnings=("Avoid waterlogged conditions",),
            tutorial_video="https://www.youtube.com/embed/rLQGp0vKnhI",
        ),
        WorkflowStep(
            id="ct4", title="Gap Filling & Thinning", icon="Sprout", category=C.maintenance,
            description=(
                "Fill gaps within 10 days of sowing. Thin to one healthy plant per hill at "
                "15-20 DAS. Ensure uniform plant population of 11,000-12,000/ha."
            ),
            points=100, eco_points=50, estimated_days=5,
            tools=("Hand Trowel",),
            tutorial_video="https://www.youtube.com/embed/dxJzgGqXcxY",
        ),
        WorkflowStep(
            id="ct5", title="First Irrigation & Fertilizer", icon="Droplets", category=C.maintenance,
            description=(
                "First irrigation at 3 weeks. Apply 60kg N, 30kg P, 30kg K per hectare as basal "
                "+ 30kg N at square formation. Use drip for water efficiency."
            ),
            points=160, eco_points=180, estimated_days=2,
            tools=("Drip System", "Urea", "DAP"),
            tutorial_video="https://www.youtube.com/embed/wFN9FQxjE6Y",
        ),
        WorkflowStep(
            id="ct6", title="Pest Scouting & IPM", icon="ShieldCheck", category=C.protection,
            description=(
                "Weekly scouting for bollworms, whitefly, jassids. Install yellow sticky traps. "
                "Spray neem oil @ 5ml/L for minor infestations. Maintain refuge crop (20% non-Bt)."
            ),
            points=150, eco_points=120, estimated_days=60,
            tools=("Sticky Traps", "Neem Oil", "Sprayer"),
            warnings=("Early pest detection is critical",),
            tutorial_video="https://www.youtube.com/embed/b7N2I2RKPMU",
        ),
        WorkflowStep(
            id="ct7", title="Flowering & Boll Formation", icon="Zap", category=C.maintenance,
            description=(
                "Apply second N dose (30kg) at flowering (60 DAS). Maintain soil moisture during "
                "boll development. Apply 2% DAP spray for enhanced boll weight."
            ),
            points=170, eco_points=90, estimated_days=30,
            tools=("Foliar Sprayer", "DAP"),
            tutorial_video="https://www.youtube.com/embed/K3hJQz5qYnY",
        ),
        WorkflowStep(
            id="ct8", title="Boll Opening Management", icon="Check", category=C.maintenance,
            description=(
                "Stop irrigation 3 weeks before expected harvest. Apply defoliant if needed for "
                "mechanical picking. Monitor for pink bollworm with pheromone traps."
            ),
            points=140, eco_points=70, estimated_days=20,
            tools=("Pheromone Traps",),
            tutorial_video="https://www.youtube.com/embed/uJmLN1qLSEg",
        ),
        WorkflowStep(
            id="ct9", title="First Picking", icon="Wheat", category=C.harvest,
            description=(
                "Start picking when 40-50% bolls open. Pick only fully opened, fluffy bolls. "
                "Avoid mixing with yellow/stained cotton. Use clean cloth bags."
            ),
            points=200, eco_points=100, estimated_days=5,
            tools=("Picking Bags", "Weighing Scale"),
            tutorial_video="https://www.youtube.com/embed/L3TZjz5rHlQ",
        ),
        WorkflowStep(
            id="ct10", title="Second Picking & Storage", icon="Wheat", category=C.harvest,
            description=(
                "Second picking at 2-week interval. Total 3-4 pickings needed. Dry kapas to "
                "8-10% moisture. Store in moisture-proof godowns away from fertilizers."
            ),
            points=250, eco_points=130, estimated_days=10,
            tools=("Storage Bags", "Moisture Meter"),
            warnings=("Wet cotton causes quality deterioration",),
            tutorial_video="https://www.youtube.com/embed/RnKcL9Q3EZE",
        ),
    ),
)


SUGARCANE = CropDefinition(
    id="c4",
    name="Sugarcane",
    category="Cash Crops",
    season=Season.kharif,
    water_requirement=WaterRequirement.high,
    water_instruction="Req 1500-2500 mm. Frequent during germination and tillering.",
    soil_suitability=("Alluvial", "Black", "Loamy"),
    spacing="90 cm (Row Spacing)",
    fun_fact="India is the second largest producer of sugarcane globally.",
    subsidies=("Sugar Development Fund", "State Cane Price"),
    care_tips=(
        "Earthing up at 3 and 5 months prevents lodging",
        "Propping should be done to support heavy canes",
        "Monitor for red rot and smut diseases",
    ),
    workflow=(
        WorkflowStep(
            id="sg1", title="Deep Ploughing & Furrowing", icon="Tractor", category=C.preparation,
            description=(
                "Deep ploughing (45cm) followed by harrowing. Make furrows 75-90cm apart and "
                "20-25cm deep. Apply 25 tons FYM per hectare in furrows."
            ),
            points=120, eco_points=70, estimated_days=5,
            tools=("Subsoiler", "Furrower", "FYM"),
            tutorial_video="https://www.youtube.com/embed/Q7ZxHw9TnQg",
        ),
        WorkflowStep(
            id="sg2", title="Sett Selection & Treatment", icon="Sprout", category=C.sowing,
            description=(
                "Select 9-10 month old cane for setts. Cut into 3-bud setts. Treat with "
                "Carbendazim (0.1%) for 15 min. Use 40,000 setts per hectare."
            ),
            points=150, eco_points=90, estimated_days=2,
            tools=("Sett Cutter", "Fungicide Solution"),
            tutorial_video="https://www.youtube.com/embed/j8xnXJa9M_s",
        ),
        WorkflowStep(
            id="sg3", title="Planting", icon="Sprout", category=C.sowing,
            description=(
                "Place setts horizontally in furrows with buds facing up. Cover with 5-7cm soil. "
                "Optimal planting: Feb-March (spring) or Oct (autumn). Trench method for better yields."
            ),
            points=200, eco_points=80, estimated_days=4,
            tools=("Planting Basket",),
            warnings=("Avoid planting in waterlogged soil",),
            tutorial_video="https://www.youtube.com/embed/fLxN0GnPKQw",
        ),
        WorkflowStep(
            id="sg4", title="Gap Filling", icon="Sprout", category=C.maintenance,
            description=(
                "Fill gaps within 30 days using sprouted setts from nursery. Maintain 85-90% "
                "germination. Critical for achieving target yield of 100 tons/ha."
            ),
            points=100, eco_points=50, estimated_days=5,
            tools=("Sprouted Setts",),
            tutorial_video="https://www.youtube.com/embed/wRqJvBqVZpA",
        ),
        WorkflowStep(
            id="sg5", title="First Earthing Up & Fertilizer", icon="Zap", category=C.maintenance,
            description=(
                "First earthing at 45 days. Apply 75kg N + 40kg P + 40kg K per hectare. Split N "
                "in 3 doses. Use trash mulching for moisture conservation."
            ),
            points=180, eco_points=150, estimated_days=3,
            tools=("Ridger", "Urea", "Mulch"),
            tutorial_video="https://www.youtube.com/embed/kxPmn3N5BEU",
        ),
        WorkflowStep(
            id="sg6", title="Irrigation Management", icon="Droplets", category=C.maintenance,
            description=(
                "Irrigate every 7-10 days in summer, 15-20 days in winter. Critical stages: "
                "tillering and grand growth. Adopt drip/furrow irrigation for efficiency."
            ),
            points=160, eco_points=200, estimated_days=90,
            tools=("Drip System", "Furrow Irrigation"),
            tutorial_video="https://www.youtube.com/embed/5xLvPmJ9xHc",
        ),
        WorkflowStep(
            id="sg7", title="Pest & Disease Control", icon="ShieldCheck", category=C.protection,
            description=(
                "Monitor for early shoot borer, top borer, scale insects. Release Trichogramma "
                "parasites @ 50,000/ha. Check for red rot, smut diseases regularly."
            ),
            points=150, eco_points=110, estimated_days=60,
            tools=("Trichogramma Cards", "Light Traps"),
            warnings=("Destroy affected canes immediately",),
            tutorial_video="https://www.youtube.com/embed/Y7tpQqHNf8g",
        ),
        WorkflowStep(
            id="sg8", title="Second Earthing & Propping", icon="Tractor", category=C.maintenance,
            description=(
                "Second earthing at 90 days with remaining N dose. Tie canes in bundles to "
                "prevent lodging. Remove water suckers and dried leaves."
            ),
            points=140, eco_points=80, estimated_days=5,
            tools=("Rope", "Sickle"),
            tutorial_video="https://www.youtube.com/embed/u9N7R3aqMJc",
        ),
        WorkflowStep(
            id="sg9", title="Maturity Assessment", icon="Check", category=C.harvest,
            description=(
                "Check brix reading (18-20%) using refractometer. Cane should be 10-12 months "
                "old. Stop irrigation 15 days before harvest. Inform sugar mill."
            ),
            points=130, eco_points=60, estimated_days=7,
            tools=("Refractometer", "Brix Meter"),
            tutorial_video="https://www.youtube.com/embed/pgK8R0vE1Pc",
        ),
        WorkflowStep(
            id="sg10", title="Harvesting", icon="Wheat", category=C.harvest,
            description=(
                "Harvest at ground level using sharp cane knife. Remove tops and trash. "
                "Transport within 24 hours to mill. Ratoon management for next crop."
            ),
            points=300, eco_points=150, estimated_days=10,
            tools=("Cane Harvester", "Transport Cart"),
            warnings=("Delayed crushing reduces sugar recovery",),
            tutorial_video="https://www.youtube.com/embed/3CRwXfdhJ0Q",
        ),
    ),
)


POTATO = CropDefinition(
    id="c6",
    name="Potato",
    category="Vegetables",
    season=Season.rabi,
    water_requirement=WaterRequirement.medium,
    water_instruction="7-10 day intervals. Critical during stolonization and bulking.",
    soil_suitability=("Sandy Loam", "Alluvial"),
    spacing="60 cm x 20 cm",
    fun_fact="India is the second largest potato producer after China.",
    subsidies=("Potato Development Scheme",),
    care_tips=(
        "Earthing up is crucial to cover expanding tubers",
        "Monitor for Late Blight in cloudy/humid weather",
        "Stop irrigation 15 days before harvest for skin hardening",
    ),
    workflow=(
        WorkflowStep(
            id="pt1", title="Field Preparation", icon="Tractor", category=C.preparation,
            description=(
                "Deep ploughing (25-30cm) in summer. Apply 20-25 tons FYM/ha. Make ridges 60cm "
                "apart and 15-20cm high. Ensure good drainage."
            ),
            points=110, eco_points=70, estimated_days=4,
            tools=("Plough", "Ridger", "FYM"),
            tutorial_video="https://www.youtube.com/embed/8HqKnRLG0IY",
        ),
        WorkflowStep(
            id="pt2", title="Seed Selection & Treatment", icon="Sprout", category=C.sowing,
            description=(
                "Use certified seed tubers (30-40g). Cold store at 2-4C before planting. Treat "
                "with Mancozeb + Streptocycline solution. Require 20-25 quintals/ha."
            ),
            points=130, eco_points=80, estimated_days=2,
            tools=("Seed Tubers", "Treatment Solution"),
            warnings=("Avoid diseased or sprouted tubers",),
            tutorial_video="https://www.youtube.com/embed/LpQvXNY6J8U",
        ),
        WorkflowStep(
            id="pt3", title="Planting", icon="Sprout", category=C.sowing,
            description=(
                "Plant on ridges at 20cm spacing within rows. Place tubers 5-7cm deep with eyes "
                "facing up. Optimal time: Oct-Nov (plains), Feb-Mar (hills)."
            ),
            points=180, eco_points=60, estimated_days=3,
            tools=("Dibbler", "Planter"),
            tutorial_video="https://www.youtube.com/embed/QxMV3rFgT8s",
        ),
        WorkflowStep(
            id="pt4", title="First Irrigation", icon="Droplets", category=C.maintenance,
            description=(
                "Light irrigation immediately after planting. Repeat every 7-10 days. Critical "
                "moisture needed at stolon formation (30-40 DAP). Avoid waterlogging."
            ),
            points=140, eco_points=180, estimated_days=5,
            tools=("Sprinkler", "Furrow Channel"),
            tutorial_video="https://www.youtube.com/embed/K5vP7mWzN3A",
        ),
        WorkflowStep(
            id="pt5", title="Earthing Up & Fertilizer", icon="Tractor", category=C.maintenance,
            description=(
                "First earthing at 25-30 DAP. Apply 120kg N, 80kg P, 100kg K per hectare in "
                "splits. Second earthing at 45 DAP to cover developing tubers."
            ),
            points=170, eco_points=100, estimated_days=3,
            tools=("Ridger", "NPK Fertilizers"),
            tutorial_video="https://www.youtube.com/embed/4H2nQxVpL0c",
        ),
        WorkflowStep(
            id="pt6", title="Pest Surveillance", icon="ShieldCheck", category=C.protection,
            description=(
                "Monitor for aphids, cutworms, potato tuber moth. Check for late blight "
                "(Phytophthora) especially in foggy weather. Install pheromone traps."
            ),
            points=150, eco_points=110, estimated_days=30,
            tools=("Traps", "Mancozeb", "Sprayer"),
            warnings=("Late blight spreads rapidly in humid conditions",),
            tutorial_video="https://www.youtube.com/embed/u9eJLn9Qp8E",
        ),
        WorkflowStep(
            id="pt7", title="Late Blight Management", icon="ShieldCheck", category=C.protection,
            description=(
                "Prophylactic spray of Mancozeb @ 2g/L every 7 days in susceptible period. Use "
                "systemic fungicides if infection starts. Remove infected plants."
            ),
            points=160, eco_points=90, estimated_days=20,
            tools=("Systemic Fungicide", "Knapsack Sprayer"),
            tutorial_video="https://www.youtube.com/embed/rG3XdHvM7eA",
        ),
        WorkflowStep(
            id="pt8", title="Tuber Bulking", icon="Zap", category=C.maintenance,
            description=(
                "Critical irrigation during 50-80 DAP for size development. Apply potassium "
                "nitrate foliar spray for quality. Reduce nitrogen after 60 DAP."
            ),
            points=140, eco_points=80, estimated_days=30,
            tools=("Potassium Nitrate", "Irrigation System"),
            tutorial_video="https://www.youtube.com/embed/hL5sNwF2A6k",
        ),
        WorkflowStep(
            id="pt9", title="Dehaulming", icon="Check", category=C.harvest,
            description=(
                "Cut or destroy foliage 10-15 days before harvest for skin hardening. Reduces "
                "tuber moth damage. Stop irrigation after dehaulming."
            ),
            points=120, eco_points=70, estimated_days=3,
            tools=("Sickle", "Dehaulmer"),
            tutorial_video="https://www.youtube.com/embed/VQ8nJ4r1Wqc",
        ),
        WorkflowStep(
            id="pt10", title="Harvesting & Storage", icon="Wheat", category=C.harvest,
            description=(
                "Harvest when soil is dry using potato digger. Cure tubers in shade for 10-14 "
                "days. Store in cold storage at 2-4C or country store with ventilation."
            ),
            points=250, eco_points=140, estimated_days=7,
            tools=("Potato Digger", "Curing Shed", "Storage Bags"),
            warnings=("Avoid harvesting in wet conditions",),
            tutorial_video="https://www.youtube.com/embed/WM3t1Lbn4SE",
        ),
    ),
)


MAIZE = CropDefinition(
    id="c7",
    name="Maize (Corn)",
    category="Grains",
    season=Season.kharif,
    water_requirement=WaterRequirement.medium,
    water_instruction="Tasseling and silking stages are critical for moisture.",
    soil_suitability=("Loamy", "Sandy Loam", "Alluvial"),
    spacing="60 cm x 20 cm",
    fun_fact="Maize has the highest production potential among cereals.",
    subsidies=("Maize Development Programme",),
    care_tips=(
        "Maintain weed-free environment for first 45 days",
        "Tasseling and silking are critical water stages",
        "Monitor for Fall Armyworm (FAW) regularly",
    ),
    workflow=(
        WorkflowStep(
            id="mz1", title="Land Preparation", icon="Tractor", category=C.preparation,
            description=(
                "Plough 2-3 times to achieve fine tilth. Apply 10 tons FYM/ha. Level field for "
                "uniform irrigation. Make furrows at 60-75cm spacing."
            ),
            points=100, eco_points=60, estimated_days=4,
            tools=("Plough", "Harrow", "Leveler"),
            tutorial_video="https://www.youtube.com/embed/wH5L7P1KJvI",
        ),
        WorkflowStep(
            id="mz2", title="Seed Treatment & Selection", icon="Sprout", category=C.sowing,
            description=(
                "Use certified hybrid seeds (PEHM-5, DHM-117). Treat with Thiram @ 3g/kg. Seed "
                "rate: 18-20kg/ha for hybrids. Dry treated seeds before sowing."
            ),
            points=120, eco_points=80, estimated_days=1,
            tools=("Thiram", "Seed Drum"),
            tutorial_video="https://www.youtube.com/embed/6xNQP4dL2hE",
        ),
        WorkflowStep(
            id="mz3", title="Sowing", icon="Sprout", category=C.sowing,
            description=(
                "Sow at 5-7cm depth with 60x20cm spacing using seed drill. Optimal time: "
                "June-July (Kharif), Oct-Nov (Rabi). Ensure 75,000-80,000 plants/ha."
            ),
            points=180, eco_points=70, estimated_days=2,
            tools=("Seed Drill", "Planter"),
            warnings=("Delays reduce yield significantly",),
            tutorial_video="https://www.youtube.com/embed/R9vJq8F3Uc4",
        ),
        WorkflowStep(
            id="mz4", title="Thinning & Gap Filling", icon="Sprout", category=C.maintenance,
            description=(
                "Thin to one plant per hill at 10-15 DAS. Fill gaps immediately using "
                "transplants from thick areas. Target: 65-70 thousand plants/ha."
            ),
            points=90, eco_points=50, estimated_days=3,
            tools=("Hand Hoe",),
            tutorial_video="https://www.youtube.com/embed/5Mn3LqQpVKE",
        ),
        WorkflowStep(
            id="mz5", title="First Fertilizer & Irrigation", icon="Droplets", category=C.maintenance,
            description=(
                "Apply full P&K and 1/3 N as basal. First irrigation at 3 weeks. Use drip for "
                "40% water savings. Critical stage: knee-high (V6)."
            ),
            points=160, eco_points=180, estimated_days=5,
            tools=("Drip System", "NPK", "Urea"),
            tutorial_video="https://www.youtube.com/embed/KH3nM8xP1Ro",
        ),
        WorkflowStep(
            id="mz6", title="Weed Management", icon="Tractor", category=C.protection,
            description=(
                "Pre-emergence: Atrazine @ 1.5kg/ha within 3 DAS. Mechanical weeding at "
                "20-25 DAS. Critical weed-free period: first 45 days."
            ),
            points=140, eco_points=100, estimated_days=7,
            tools=("Herbicide", "Weeder"),
            warnings=("Late weeding reduces yield by 30%",),
            tutorial_video="https://www.youtube.com/embed/L9VKl8PqR4c",
        ),
        WorkflowStep(
            id="mz7", title="Top Dressing & Earthing", icon="Zap", category=C.maintenance,
            description=(
                "Apply second 1/3 nitrogen at knee-high stage (25-30 DAS). Final 1/3 at "
                "tasseling. Earthing up to provide root support and reduce lodging."
            ),
            points=150, eco_points=80, estimated_days=3,
            tools=("Urea", "Earthing Blade"),
            tutorial_video="https://www.youtube.com/embed/8XwJN5vQnPY",
        ),
        WorkflowStep(
            id="mz8", title="Pest & Disease Monitoring", icon="ShieldCheck", category=C.protection,
            description=(
                "Scout for stem borer and Fall armyworm (FAW). Check for leaf blight, downy "
                "mildew. Apply Spinosad for FAW, Mancozeb for blights."
            ),
            points=160, eco_points=110, estimated_days=40,
            tools=("Light Traps", "Pesticide", "Sprayer"),
            tutorial_video="https://www.youtube.com/embed/dP5nRxQJ7Wg",
        ),
        WorkflowStep(
            id="mz9", title="Silking & Grain Fill", icon="Droplets", category=C.maintenance,
            description=(
                "Critical irrigation at silking and grain filling (60-80 DAS). Water stress "
                "reduces grain weight. Apply zinc sulfate spray if deficiency seen."
            ),
            points=170, eco_points=90, estimated_days=20,
            tools=("Irrigation", "Zinc Sulfate"),
            warnings=("Water stress at silking causes barren cobs",),
            tutorial_video="https://www.youtube.com/embed/fG9vLR6oP2A",
        ),
        WorkflowStep(
            id="mz10", title="Harvesting & Storage", icon="Wheat", category=C.harvest,
            description=(
                "Harvest when husks turn brown and grain moisture is 20-25%. Dry to 12-14% for "
                "storage. Shell and store in airtight containers with fumigation if needed."
            ),
            points=250, eco_points=140, estimated_days=5,
            tools=("Maize Harvester", "Sheller", "Storage Bins"),
            warnings=("High moisture causes aflatoxin growth",),
            tutorial_video="https://www.youtube.com/embed/3TjKvS9qH6U",
        ),
    ),
)


TURMERIC = CropDefinition(
    id="c9",
    name="Turmeric",
    category="Spices",
    season=Season.rabi,
    water_requirement=WaterRequirement.medium,
    water_instruction="Maintain consistent moisture. Avoid waterlogging at all costs.",
    soil_suitability=("Sandy Loam", "Clayey Loam", "Well-drained Alluvial"),
    spacing="30 cm x 15 cm",
    fun_fact="India satisfies over 75% of the total global demand for Turmeric.",
    subsidies=("Spice Board Support", "Export Incentive"),
    care_tips=(
        "Deep mulching with green leaves protects rhizomes",
        "Perform earthing up twice at 60 and 90 days",
        "Control shoot borer for healthy rhizome development",
    ),
    workflow=(
        WorkflowStep(
            id="tu1", title="Land Preparation", icon="Tractor", category=C.preparation,
            description=(
                "Prepare raised beds or ridges to ensure excellent drainage. Mix 20-25 tonnes "
                "of FYM per hectare. Ensure soil is free of clods."
            ),
            points=100, eco_points=60, estimated_days=5,
            tools=("Plough", "Ridger"),
            tutorial_video="https://www.youtube.com/embed/qKyqK_rE_eI",
        ),
        WorkflowStep(
            id="tu2", title="Rhizome Selection", icon="Sprout", category=C.sowing,
            description=(
                "Select healthy, disease-free mother or finger rhizomes weighing 30-40g. Treat "
                "with Carbendazim (0.3%) for 30 mins to prevent rot."
            ),
            points=120, eco_points=80, estimated_days=2,
            tools=("Rhizomes", "Fungicide"),
            tutorial_video="https://www.youtube.com/embed/LpQvXNY6J8U",
        ),
        WorkflowStep(
            id="tu3", title="Planting", icon="Sprout", category=C.sowing,
            description=(
                "Plant rhizomes 5-7cm deep with 30x15cm spacing. Ensure terminal buds face "
                "upwards. Optimal planting time: May to June."
            ),
            points=180, eco_points=70, estimated_days=3,
            tools=("Hand Hoe",),
            warnings=("Poor drainage causes rhizome rot",),
            tutorial_video="https://www.youtube.com/embed/ZjGl3KnQMsk",
        ),
        WorkflowStep(
            id="tu4", title="Mulching", icon="Leaf", category=C.maintenance,
            description=(
                "Apply green leaf mulch (12-15 tonnes/ha) immediately after planting to "
                "conserve moisture and suppress weeds."
            ),
            points=100, eco_points=150, estimated_days=2,
            tools=("Leaf Mulch",),
            tutorial_video="https://www.youtube.com/embed/wFN9FQxjE6Y",
        ),
        WorkflowStep(
            id="tu5", title="First Irrigation & Fertilizer", icon="Droplets", category=C.maintenance,
            description=(
                "Provide light irrigation after planting. Apply 60kg N, 50kg P, 120kg K per "
                "hectare in split doses. N is applied at 30, 60, and 90 DAS."
            ),
            points=150, eco_points=90, estimated_days=5,
            tools=("Drip/Sprinkler", "NPK"),
            tutorial_video="https://www.youtube.com/embed/kxPmn3N5BEU",
        ),
        WorkflowStep(
            id="tu6", title="Weeding & Earthing Up", icon="Tractor", category=C.maintenance,
            description=(
                "Keep the field weed-free for the first 120 days. Perform earthing up twice "
                "(60 and 90 DAS) to cover developing rhizomes."
            ),
            points=140, eco_points=80, estimated_days=10,
            tools=("Weeder",),
            tutorial_video="https://www.youtube.com/embed/u9N7R3aqMJc",
        ),
        WorkflowStep(
            id="tu7", title="Pest Monitoring", icon="ShieldCheck", category=C.protection,
            description=(
                "Watch for shoot borers and rhizome scales. Use neem-based sprays for early "
                "intervention. Monitor for leaf spot and rhizome rot."
            ),
            points=160, eco_points=120, estimated_days=120,
            tools=("Neem Oil", "Sprayer"),
            tutorial_video="https://www.youtube.com/embed/pR4XcRz5A1A",
        ),
        WorkflowStep(
            id="tu8", title="Second Fertilizer Boost", icon="Zap", category=C.maintenance,
            description=(
                "Final N top-dressing at 90 days. Foliar spray of micronutrients (Zinc, Iron) "
                "improves rhizome quality and curcumin content."
            ),
            points=170, eco_points=100, estimated_days=30,
            tools=("Micronutrient Spray",),
            tutorial_video="https://www.youtube.com/embed/FpR5NdVqJXc",
        ),
        WorkflowStep(
            id="tu9", title="Harvest Preparation", icon="Check", category=C.harvest,
            description=(
                "Harvest when leaves turn yellow and start drying (7-9 months after planting). "
                "Stop irrigation 15-20 days before harvest."
            ),
            points=140, eco_points=70, estimated_days=15,
            tools=("Sickle",),
            tutorial_video="https://www.youtube.com/embed/wDjhOjP3HXg",
        ),
        WorkflowStep(
            id="tu10", title="Harvesting & Curing", icon="Wheat", category=C.harvest,
            description=(
                "Lift rhizomes carefully with a spade or power lifter. Clean soil, separate "
                "mother rhizomes. Boil in water for 45-60 mins, then sun-dry."
            ),
            points=300, eco_points=200, estimated_days=15,
            tools=("Spade", "Boiling Tank", "Drying Yard"),
            warnings=("Over-boiling reduces quality and color",),
            tutorial_video="https://www.youtube.com/embed/3PkRLz8a0xk",
        ),
    ),
)


CULTIVATION_LIBRARY = (
    WHEAT,
    BASMATI_RICE,
    COTTON,
    SUGARCANE,
    TOMATO,
    POTATO,
    MAIZE,
    MUSTARD,
    TURMERIC,
)
