"""Seed data for the default food catalog."""

from foodcheck.domain.analysis import NutritionFacts
from foodcheck.domain.catalog import FoodItem, FoodMetadata


def default_catalog() -> list[FoodItem]:
    """Return the built-in catalog entries in display order."""
    return [
        FoodItem(
            id="healthy_quinoa_power_bowl",
            name="Organic Quinoa Power Bowl",
            brand="Green Harvest",
            category="Healthy Meals",
            barcode="0850001234017",
            health_score=95,
            taste_score=88,
            consumer_score=93,
            environmental_score=90,
            nutrition=NutritionFacts.from_amounts(
                calories=420,
                protein=18,
                carbohydrates=58,
                fat=12,
                saturated_fat=1.5,
                fiber=11,
                sugar=6,
                sodium_mg=380,
                vitamins=["Iron", "Magnesium", "Vitamin C"],
            ),
            ingredients=(
                "Organic quinoa",
                "Black beans",
                "Roasted sweet potato",
                "Kale",
                "Avocado",
                "Lime tahini dressing",
            ),
            allergens=("sesame",),
            metadata=FoodMetadata(
                certifications=("USDA Organic", "Non-GMO Project Verified"),
                price_range="$$",
                dietary_tags=("vegan", "gluten-free", "high-protein"),
                origin="USA",
                mood_impact=82,
                serving_size="1 bowl (350g)",
            ),
        ),
        FoodItem(
            id="healthy_greek_yogurt",
            name="Plain Greek Yogurt",
            brand="Fage",
            category="Dairy",
            barcode="0689544080015",
            health_score=88,
            taste_score=70,
            consumer_score=84,
            environmental_score=62,
            nutrition=NutritionFacts.from_amounts(
                calories=130,
                protein=23,
                carbohydrates=6,
                fat=0,
                sugar=6,
                sodium_mg=85,
                cholesterol_mg=10,
                vitamins=["Calcium", "Vitamin B12"],
            ),
            ingredients=("Pasteurized skimmed milk", "Live active cultures"),
            allergens=("milk",),
            metadata=FoodMetadata(
                certifications=("Kosher",),
                price_range="$",
                dietary_tags=("vegetarian", "gluten-free", "high-protein"),
                origin="Greece",
                mood_impact=64,
                serving_size="1 container (170g)",
            ),
        ),
        FoodItem(
            id="healthy_steel_cut_oats",
            name="Steel Cut Oats",
            brand="Bob's Red Mill",
            category="Breakfast Cereal",
            barcode="0039978003645",
            health_score=90,
            taste_score=65,
            consumer_score=78,
            environmental_score=85,
            nutrition=NutritionFacts.from_amounts(
                calories=150,
                protein=5,
                carbohydrates=27,
                fat=2.5,
                saturated_fat=0.5,
                fiber=4,
                sugar=1,
                sodium_mg=0,
                vitamins=["Iron", "Manganese"],
            ),
            ingredients=("Whole grain oats",),
            allergens=(),
            metadata=FoodMetadata(
                certifications=("Whole Grain Council",),
                price_range="$",
                dietary_tags=("vegan", "whole-grain"),
                origin="USA",
                mood_impact=70,
                serving_size="1/4 cup dry (40g)",
            ),
        ),
        FoodItem(
            id="healthy_wild_salmon",
            name="Wild Alaskan Salmon Fillet",
            brand="Kirkland Signature",
            category="Seafood",
            health_score=94,
            taste_score=86,
            consumer_score=85,
            environmental_score=72,
            nutrition=NutritionFacts.from_amounts(
                calories=200,
                protein=28,
                fat=9,
                saturated_fat=1.5,
                sodium_mg=60,
                cholesterol_mg=70,
                vitamins=["Vitamin D", "Omega-3", "Vitamin B12"],
            ),
            ingredients=("Wild sockeye salmon",),
            allergens=("fish",),
            metadata=FoodMetadata(
                certifications=("MSC Certified",),
                price_range="$$$",
                dietary_tags=("pescatarian", "keto", "high-protein", "gluten-free"),
                origin="USA",
                mood_impact=78,
                serving_size="1 fillet (113g)",
            ),
        ),
        FoodItem(
            id="healthy_almond_butter",
            name="Creamy Almond Butter",
            brand="Justin's",
            category="Spreads",
            barcode="0894455000025",
            health_score=76,
            taste_score=82,
            consumer_score=80,
            environmental_score=48,
            nutrition=NutritionFacts.from_amounts(
                calories=190,
                protein=7,
                carbohydrates=6,
                fat=17,
                saturated_fat=1.5,
                fiber=3,
                sugar=1,
                sodium_mg=0,
                vitamins=["Vitamin E", "Magnesium"],
            ),
            ingredients=("Dry roasted almonds", "Palm oil"),
            allergens=("tree nuts",),
            metadata=FoodMetadata(
                certifications=("Non-GMO Project Verified",),
                price_range="$$",
                dietary_tags=("vegan", "keto", "gluten-free"),
                origin="USA",
                mood_impact=66,
                serving_size="2 tbsp (32g)",
            ),
        ),
        FoodItem(
            id="healthy_lentil_soup",
            name="Organic Lentil Soup",
            brand="Amy's",
            category="Soups",
            barcode="0042272005055",
            health_score=84,
            taste_score=74,
            consumer_score=77,
            environmental_score=88,
            nutrition=NutritionFacts.from_amounts(
                calories=180,
                protein=8,
                carbohydrates=25,
                fat=5,
                saturated_fat=0.5,
                fiber=6,
                sugar=3,
                sodium_mg=590,
                vitamins=["Iron", "Folate"],
            ),
            ingredients=("Organic lentils", "Organic carrots", "Organic celery"),
            allergens=(),
            metadata=FoodMetadata(
                certifications=("USDA Organic",),
                price_range="$",
                dietary_tags=("vegan", "gluten-free"),
                origin="USA",
                mood_impact=68,
                serving_size="1 cup (245g)",
            ),
        ),
        FoodItem(
            id="moderate_whole_wheat_bread",
            name="100% Whole Wheat Bread",
            brand="Dave's Killer Bread",
            category="Bakery",
            barcode="0013764027206",
            health_score=72,
            taste_score=71,
            consumer_score=68,
            environmental_score=60,
            nutrition=NutritionFacts.from_amounts(
                calories=110,
                protein=5,
                carbohydrates=22,
                fat=1.5,
                fiber=3,
                sugar=4,
                sodium_mg=170,
            ),
            ingredients=("Whole wheat flour", "Water", "Cane sugar", "Seeds"),
            allergens=("wheat", "gluten"),
            metadata=FoodMetadata(
                certifications=("USDA Organic",),
                price_range="$$",
                dietary_tags=("vegan", "whole-grain"),
                origin="USA",
                mood_impact=55,
                serving_size="1 slice (45g)",
            ),
        ),
        FoodItem(
            id="moderate_margherita_pizza",
            name="Margherita Pizza",
            brand="Amy's",
            category="Frozen Pizza",
            barcode="0042272000913",
            health_score=48,
            taste_score=80,
            consumer_score=74,
            environmental_score=55,
            nutrition=NutritionFacts.from_amounts(
                calories=290,
                protein=12,
                carbohydrates=37,
                fat=11,
                saturated_fat=5,
                fiber=2,
                sugar=5,
                sodium_mg=590,
                cholesterol_mg=20,
            ),
            ingredients=("Wheat flour", "Mozzarella cheese", "Tomatoes", "Basil"),
            allergens=("wheat", "gluten", "milk"),
            metadata=FoodMetadata(
                price_range="$$",
                dietary_tags=("vegetarian",),
                origin="Italy",
                mood_impact=74,
                serving_size="1/3 pizza (123g)",
            ),
        ),
        FoodItem(
            id="moderate_granola_bar",
            name="Oats 'n Honey Granola Bar",
            brand="Nature Valley",
            category="Snacks",
            barcode="0016000264601",
            health_score=45,
            taste_score=72,
            consumer_score=70,
            environmental_score=50,
            nutrition=NutritionFacts.from_amounts(
                calories=190,
                protein=3,
                carbohydrates=29,
                fat=7,
                saturated_fat=1,
                fiber=2,
                sugar=11,
                sodium_mg=160,
            ),
            ingredients=("Whole grain oats", "Sugar", "Canola oil", "Honey"),
            allergens=("gluten",),
            metadata=FoodMetadata(
                price_range="$",
                dietary_tags=("vegetarian",),
                origin="USA",
                mood_impact=58,
                serving_size="2 bars (42g)",
            ),
        ),
        FoodItem(
            id="moderate_tofu",
            name="Extra Firm Tofu",
            brand="Nasoya",
            category="Plant Protein",
            barcode="0025484005114",
            health_score=82,
            taste_score=55,
            consumer_score=62,
            environmental_score=80,
            nutrition=NutritionFacts.from_amounts(
                calories=90,
                protein=10,
                carbohydrates=2,
                fat=5,
                saturated_fat=1,
                fiber=1,
                sodium_mg=10,
                vitamins=["Calcium", "Iron"],
            ),
            ingredients=("Water", "Organic soybeans", "Calcium sulfate"),
            allergens=("soy",),
            metadata=FoodMetadata(
                certifications=("USDA Organic", "Non-GMO Project Verified"),
                price_range="$",
                dietary_tags=("vegan", "gluten-free", "high-protein"),
                origin="USA",
                mood_impact=52,
                serving_size="1/5 block (79g)",
            ),
        ),
        FoodItem(
            id="american_big_mac",
            name="Big Mac",
            brand="McDonald's",
            category="American Fast Food",
            health_score=20,
            taste_score=90,
            consumer_score=95,
            environmental_score=25,
            nutrition=NutritionFacts.from_amounts(
                calories=563,
                protein=25,
                carbohydrates=45,
                fat=33,
                saturated_fat=11,
                fiber=3,
                sugar=9,
                sodium_mg=1040,
                cholesterol_mg=85,
                vitamins=["Vitamin A", "Vitamin C"],
            ),
            ingredients=(
                "Sesame seed bun",
                "Beef patties",
                "Big Mac sauce",
                "Lettuce",
                "Cheese",
                "Pickles",
                "Onions",
            ),
            allergens=("gluten", "milk", "eggs", "sesame"),
            metadata=FoodMetadata(
                price_range="$",
                dietary_tags=(),
                origin="USA",
                mood_impact=71,
                serving_size="1 sandwich (230g)",
            ),
        ),
        FoodItem(
            id="american_french_fries",
            name="Medium French Fries",
            brand="McDonald's",
            category="American Fast Food",
            health_score=25,
            taste_score=88,
            consumer_score=92,
            environmental_score=35,
            nutrition=NutritionFacts.from_amounts(
                calories=320,
                protein=5,
                carbohydrates=43,
                fat=15,
                saturated_fat=2,
                fiber=4,
                sugar=0,
                sodium_mg=260,
            ),
            ingredients=("Potatoes", "Vegetable oil", "Dextrose", "Salt"),
            allergens=(),
            metadata=FoodMetadata(
                price_range="$",
                dietary_tags=("vegetarian",),
                origin="USA",
                mood_impact=69,
                serving_size="1 medium (111g)",
            ),
        ),
        FoodItem(
            id="snack_doritos_nacho",
            name="Doritos Nacho Cheese",
            brand="Doritos",
            category="Snacks",
            barcode="0028400090858",
            health_score=18,
            taste_score=92,
            consumer_score=94,
            environmental_score=30,
            nutrition=NutritionFacts.from_amounts(
                calories=150,
                protein=2,
                carbohydrates=18,
                fat=8,
                saturated_fat=1,
                fiber=1,
                sugar=1,
                sodium_mg=210,
            ),
            ingredients=("Corn", "Vegetable oil", "Cheddar cheese", "Salt", "MSG"),
            allergens=("milk",),
            metadata=FoodMetadata(
                price_range="$",
                dietary_tags=("vegetarian",),
                origin="USA",
                mood_impact=62,
                serving_size="1 oz (28g)",
            ),
        ),
        FoodItem(
            id="beverage_coca_cola",
            name="Coca-Cola Classic",
            brand="Coca-Cola",
            category="Beverages",
            barcode="0049000000443",
            health_score=5,
            taste_score=85,
            consumer_score=96,
            environmental_score=28,
            nutrition=NutritionFacts.from_amounts(
                calories=140,
                carbohydrates=39,
                sugar=39,
                sodium_mg=45,
            ),
            ingredients=(
                "Carbonated water",
                "High fructose corn syrup",
                "Caramel color",
                "Phosphoric acid",
                "Caffeine",
            ),
            allergens=(),
            metadata=FoodMetadata(
                price_range="$",
                dietary_tags=("vegan", "gluten-free"),
                origin="USA",
                mood_impact=45,
                serving_size="1 can (355ml)",
            ),
        ),
        FoodItem(
            id="dessert_oreo",
            name="Oreo Chocolate Sandwich Cookies",
            brand="Nabisco",
            category="Desserts",
            barcode="0044000032029",
            health_score=12,
            taste_score=91,
            consumer_score=93,
            environmental_score=32,
            nutrition=NutritionFacts.from_amounts(
                calories=160,
                protein=1,
                carbohydrates=25,
                fat=7,
                saturated_fat=2,
                fiber=1,
                sugar=14,
                sodium_mg=135,
            ),
            ingredients=("Sugar", "Unbleached enriched flour", "Palm oil", "Cocoa"),
            allergens=("wheat", "gluten", "soy"),
            metadata=FoodMetadata(
                price_range="$",
                dietary_tags=("vegan",),
                origin="USA",
                mood_impact=76,
                serving_size="3 cookies (34g)",
            ),
        ),
        FoodItem(
            id="dessert_ice_cream",
            name="Chocolate Fudge Brownie Ice Cream",
            brand="Ben & Jerry's",
            category="Ice Cream",
            barcode="0076840100354",
            health_score=10,
            taste_score=95,
            consumer_score=90,
            environmental_score=38,
            nutrition=NutritionFacts.from_amounts(
                calories=280,
                protein=5,
                carbohydrates=33,
                fat=15,
                saturated_fat=10,
                fiber=2,
                sugar=26,
                sodium_mg=75,
                cholesterol_mg=45,
            ),
            ingredients=("Cream", "Skim milk", "Liquid sugar", "Brownies", "Cocoa"),
            allergens=("milk", "eggs", "wheat", "soy"),
            metadata=FoodMetadata(
                certifications=("Fairtrade",),
                price_range="$$",
                dietary_tags=("vegetarian",),
                origin="USA",
                mood_impact=88,
                serving_size="2/3 cup (143g)",
            ),
        ),
        FoodItem(
            id="international_kimchi",
            name="Napa Cabbage Kimchi",
            brand="Mother-in-Law's",
            category="Fermented Foods",
            barcode="0856553001040",
            health_score=86,
            taste_score=78,
            consumer_score=72,
            environmental_score=76,
            nutrition=NutritionFacts.from_amounts(
                calories=15,
                protein=1,
                carbohydrates=3,
                fiber=1,
                sugar=1,
                sodium_mg=460,
                vitamins=["Vitamin K", "Vitamin C"],
            ),
            ingredients=("Napa cabbage", "Radish", "Garlic", "Chili pepper", "Ginger"),
            allergens=("fish",),
            metadata=FoodMetadata(
                price_range="$$",
                dietary_tags=("gluten-free", "probiotic"),
                origin="South Korea",
                mood_impact=60,
                serving_size="1/2 cup (56g)",
            ),
        ),
        FoodItem(
            id="international_hummus",
            name="Classic Hummus",
            brand="Sabra",
            category="Dips",
            barcode="0040822011617",
            health_score=78,
            taste_score=80,
            consumer_score=82,
            environmental_score=74,
            nutrition=NutritionFacts.from_amounts(
                calories=70,
                protein=2,
                carbohydrates=4,
                fat=6,
                saturated_fat=1,
                fiber=1,
                sodium_mg=130,
            ),
            ingredients=("Cooked chickpeas", "Tahini", "Soybean oil", "Garlic"),
            allergens=("sesame",),
            metadata=FoodMetadata(
                certifications=("Kosher",),
                price_range="$",
                dietary_tags=("vegan", "gluten-free"),
                origin="Lebanon",
                mood_impact=63,
                serving_size="2 tbsp (28g)",
            ),
        ),
    ]
