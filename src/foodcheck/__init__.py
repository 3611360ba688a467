"""FoodCheck: food label analysis, Vish Score aggregation and history stats."""
