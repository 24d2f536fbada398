# Demo data loaded into an empty store at startup
from decimal import Decimal

MENU_ITEMS = [
    {
        "id": "1",
        "name": "Truffle Mushroom Risotto",
        "description": "Creamy arborio rice with wild mushrooms, truffle oil, and parmesan",
        "price": Decimal("28.99"),
        "category": "main",
        "image": "https://images.pexels.com/photos/1438672/pexels-photo-1438672.jpeg?auto=compress&cs=tinysrgb&w=400",
        "ingredients": ["Arborio Rice", "Wild Mushrooms", "Truffle Oil", "Parmesan", "White Wine"],
        "allergens": ["Dairy", "Alcohol"],
        "available": True,
        "prep_time": 25,
    },
    {
        "id": "2",
        "name": "Grilled Salmon",
        "description": "Fresh Atlantic salmon with lemon herb butter and seasonal vegetables",
        "price": Decimal("32.99"),
        "category": "main",
        "image": "https://images.pexels.com/photos/842571/pexels-photo-842571.jpeg?auto=compress&cs=tinysrgb&w=400",
        "ingredients": ["Atlantic Salmon", "Lemon", "Herbs", "Butter", "Seasonal Vegetables"],
        "allergens": ["Fish", "Dairy"],
        "available": True,
        "prep_time": 20,
    },
    {
        "id": "3",
        "name": "Burrata Caprese",
        "description": "Fresh burrata with heirloom tomatoes, basil, and balsamic reduction",
        "price": Decimal("16.99"),
        "category": "appetizer",
        "image": "https://images.pexels.com/photos/1647163/pexels-photo-1647163.jpeg?auto=compress&cs=tinysrgb&w=400",
        "ingredients": ["Burrata Cheese", "Heirloom Tomatoes", "Fresh Basil", "Balsamic Vinegar"],
        "allergens": ["Dairy"],
        "available": True,
        "prep_time": 10,
    },
    {
        "id": "4",
        "name": "Chocolate Lava Cake",
        "description": "Warm chocolate cake with molten center, served with vanilla ice cream",
        "price": Decimal("12.99"),
        "category": "dessert",
        "image": "https://images.pexels.com/photos/291528/pexels-photo-291528.jpeg?auto=compress&cs=tinysrgb&w=400",
        "ingredients": ["Dark Chocolate", "Butter", "Eggs", "Sugar", "Vanilla Ice Cream"],
        "allergens": ["Dairy", "Eggs", "Gluten"],
        "available": True,
        "prep_time": 15,
    },
    {
        "id": "5",
        "name": "Craft Beer Selection",
        "description": "Local IPA with citrus notes and hoppy finish",
        "price": Decimal("8.99"),
        "category": "drink",
        "image": "https://images.pexels.com/photos/1267320/pexels-photo-1267320.jpeg?auto=compress&cs=tinysrgb&w=400",
        "ingredients": ["Hops", "Malt", "Yeast", "Water"],
        "allergens": ["Gluten"],
        "available": True,
        "prep_time": 2,
    },
    {
        "id": "6",
        "name": "House Wine - Pinot Noir",
        "description": "Smooth red wine with berry notes from local vineyard",
        "price": Decimal("11.99"),
        "category": "drink",
        "image": "https://images.pexels.com/photos/1407846/pexels-photo-1407846.jpeg?auto=compress&cs=tinysrgb&w=400",
        "ingredients": ["Pinot Noir Grapes", "Sulfites"],
        "allergens": ["Sulfites"],
        "available": True,
        "prep_time": 2,
    },
]

TABLES = [
    {"id": "1", "number": 1, "name": "Window Table 1", "seat_count": 2, "status": "available"},
    {"id": "2", "number": 2, "name": "Window Table 2", "seat_count": 2, "status": "occupied"},
    {"id": "3", "number": 3, "name": "Corner Booth", "seat_count": 4, "status": "available"},
    {"id": "4", "number": 4, "name": "Center Table 1", "seat_count": 4, "status": "needs-service"},
    {"id": "5", "number": 5, "name": "Center Table 2", "seat_count": 6, "status": "available"},
    {"id": "6", "number": 6, "name": "Bar Counter", "seat_count": 8, "status": "occupied"},
    {"id": "7", "number": 7, "name": "Private Dining", "seat_count": 10, "status": "needs-cleaning"},
    {"id": "8", "number": 8, "name": "Patio Table 1", "seat_count": 4, "status": "available"},
]
