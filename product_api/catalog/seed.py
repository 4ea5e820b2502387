"""Sample records loaded into every new catalog at startup."""

from typing import Any, Dict, List


SAMPLE_PRODUCTS: List[Dict[str, Any]] = [
    {
        "id": "1",
        "name": "Laptop",
        "description": "High-performance laptop with 16GB RAM",
        "price": 1200,
        "category": "electronics",
        "inStock": True,
    },
    {
        "id": "2",
        "name": "Smartphone",
        "description": "Latest model with 128GB storage",
        "price": 800,
        "category": "electronics",
        "inStock": True,
    },
    {
        "id": "3",
        "name": "Coffee Maker",
        "description": "Programmable coffee maker with timer",
        "price": 50,
        "category": "kitchen",
        "inStock": False,
    },
    {
        "id": "4",
        "name": "Desk Chair",
        "description": "Ergonomic office chair with lumbar support",
        "price": 250,
        "category": "furniture",
        "inStock": True,
    },
    {
        "id": "5",
        "name": "Headphones",
        "description": "Noise-cancelling wireless headphones",
        "price": 150,
        "category": "electronics",
        "inStock": True,
    },
]
