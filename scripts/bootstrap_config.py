"""
Bootstrap configuration data

Everything the store bootstrap creates: store settings, regions, sales
channels, warehouses, publishable keys, shipping options, the category tree
and the product catalogue. Prices are PKR minor units (paisa).
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

CDN_BASE = "https://cdn.example.com"

STORE_NAME = "Rox Store Pakistan"

# First entry is the default currency
CURRENCIES = [
    {"currency_code": "pkr", "is_default": True},
    {"currency_code": "usd", "is_default": False},
]

REGIONS = [
    {
        "name": "Pakistan",
        "currency_code": "pkr",
        "countries": ["pk"],
        "automatic_taxes": True,
        "is_tax_inclusive": True,
    },
]

SALES_CHANNELS = [
    {
        "name": "Mobile App",
        "description": "iOS and Android mobile application",
        "is_disabled": False,
    },
]

STOCK_LOCATIONS = [
    {
        "name": "Karachi Warehouse",
        "address": {
            "address_1": "Block 7, SITE Industrial Area",
            "address_2": "Near Port Qasim",
            "city": "Karachi",
            "country_code": "pk",
            "province": "Sindh",
            "postal_code": "75500",
            "phone": "+92-21-32456789",
        },
    },
    {
        "name": "Lahore Warehouse",
        "address": {
            "address_1": "Plot 123, Industrial Area",
            "address_2": "Near Thokar Niaz Baig",
            "city": "Lahore",
            "country_code": "pk",
            "province": "Punjab",
            "postal_code": "54000",
            "phone": "+92-42-35761234",
        },
    },
    {
        "name": "Islamabad Fulfillment Center",
        "address": {
            "address_1": "I-9 Industrial Area",
            "address_2": "Sector I-9/3",
            "city": "Islamabad",
            "country_code": "pk",
            "province": "Islamabad Capital Territory",
            "postal_code": "44000",
            "phone": "+92-51-2876543",
        },
    },
]

API_KEYS = [
    {"title": "Default Publishable API Key", "type": "publishable"},
    {"title": "Mobile App Publishable Key", "type": "publishable"},
]

# Shipping
SHIPPING_PROFILE_NAME = "Default Shipping Profile"
FULFILLMENT_PROVIDER_ID = "manual_manual"
FULFILLMENT_SET_NAME = "Pakistan Delivery"
SERVICE_ZONE_NAME = "Pakistan"
INITIAL_STOCK_QUANTITY = 100


@dataclass(frozen=True)
class ShippingOptionSeed:
    name: str
    code: str
    amount: int
    description: str = ""


SHIPPING_OPTIONS = [
    ShippingOptionSeed("Standard Delivery", "standard", 25000, "Delivered in 3-5 business days"),
    ShippingOptionSeed("Express Delivery", "express", 50000, "Delivered in 1-2 business days"),
    ShippingOptionSeed("Same Day Delivery", "same-day", 100000, "Major cities only"),
    ShippingOptionSeed("Free Shipping (Orders above PKR 5000)", "free", 0, "Orders above PKR 5000"),
]


@dataclass
class CategorySeed:
    name: str
    handle: str
    description: Optional[str] = None
    is_active: bool = True
    is_internal: bool = False
    children: List["CategorySeed"] = field(default_factory=list)


CATEGORIES = [
    CategorySeed("PriceOye", "priceoye", "Electronics and gadgets at best prices", children=[
        CategorySeed("Apple", "apple", "Apple products and accessories", children=[
            CategorySeed("Phone", "apple-phone", "iPhones and accessories"),
            CategorySeed("Mac", "apple-mac", "MacBooks and iMacs"),
            CategorySeed("Accessories", "apple-accessories", "Apple accessories and peripherals"),
        ]),
        CategorySeed("Samsung", "samsung", "Samsung products and accessories", children=[
            CategorySeed("Phone", "samsung-phone", "Samsung Galaxy phones"),
            CategorySeed("Tablet", "samsung-tablet", "Samsung Galaxy tablets"),
            CategorySeed("Accessories", "samsung-accessories", "Samsung accessories"),
        ]),
    ]),
    CategorySeed("Merchantize", "merchantize", "Fashion and lifestyle products", children=[
        CategorySeed("Clothing", "clothing", "Apparel for men and women", children=[
            CategorySeed("Men", "clothing-men", "Men's clothing"),
            CategorySeed("Women", "clothing-women", "Women's clothing"),
        ]),
        CategorySeed("Footwear", "footwear", "Shoes and sandals", children=[
            CategorySeed("Sports", "footwear-sports", "Sports and athletic shoes"),
            CategorySeed("Casual", "footwear-casual", "Casual and everyday shoes"),
        ]),
    ]),
]


def _pkr(amount: int) -> List[Dict[str, Any]]:
    return [{"currency_code": "pkr", "amount": amount}]


def _images(slug: str, count: int = 1) -> List[str]:
    return [f"{CDN_BASE}/products/{slug}/image-{index}.jpg" for index in range(1, count + 1)]


# Each product names its category by handle; variant titles encode option
# values positionally ("256GB - Natural Titanium").
PRODUCTS: List[Dict[str, Any]] = [
    # PriceOye > Apple > Phone
    {
        "title": "iPhone 15 Pro Max",
        "handle": "iphone-15-pro-max",
        "description": "The most powerful iPhone ever with A17 Pro chip, titanium design, and advanced camera system.",
        "category_handle": "apple-phone",
        "thumbnail": f"{CDN_BASE}/products/iphone-15-pro-max/thumbnail.jpg",
        "images": _images("iphone-15-pro-max", 2),
        "options": [
            {"title": "Storage", "values": ["256GB", "512GB", "1TB"]},
            {"title": "Color", "values": ["Natural Titanium", "Blue Titanium", "Black Titanium"]},
        ],
        "variants": [
            {"title": "256GB - Natural Titanium", "sku": "IP15PM-256-NT", "prices": _pkr(54999900)},
            {"title": "512GB - Natural Titanium", "sku": "IP15PM-512-NT", "prices": _pkr(62999900)},
            {"title": "1TB - Natural Titanium", "sku": "IP15PM-1TB-NT", "prices": _pkr(72999900)},
            {"title": "256GB - Blue Titanium", "sku": "IP15PM-256-BT", "prices": _pkr(54999900)},
            {"title": "256GB - Black Titanium", "sku": "IP15PM-256-BLK", "prices": _pkr(54999900)},
        ],
    },
    {
        "title": "iPhone 15",
        "handle": "iphone-15",
        "description": "Dynamic Island, 48MP camera, and USB-C. The new standard for iPhone.",
        "category_handle": "apple-phone",
        "thumbnail": f"{CDN_BASE}/products/iphone-15/thumbnail.jpg",
        "images": _images("iphone-15"),
        "options": [
            {"title": "Storage", "values": ["128GB", "256GB", "512GB"]},
            {"title": "Color", "values": ["Pink", "Blue", "Green", "Black"]},
        ],
        "variants": [
            {"title": "128GB - Pink", "sku": "IP15-128-PNK", "prices": _pkr(37999900)},
            {"title": "256GB - Pink", "sku": "IP15-256-PNK", "prices": _pkr(42999900)},
            {"title": "128GB - Blue", "sku": "IP15-128-BLU", "prices": _pkr(37999900)},
            {"title": "128GB - Black", "sku": "IP15-128-BLK", "prices": _pkr(37999900)},
        ],
    },
    # PriceOye > Apple > Mac
    {
        "title": 'MacBook Pro 14" M3 Pro',
        "handle": "macbook-pro-14-m3-pro",
        "description": "Supercharged by M3 Pro chip with up to 18-core GPU. Liquid Retina XDR display.",
        "category_handle": "apple-mac",
        "images": _images("macbook-pro-14-m3-pro"),
        "options": [
            {"title": "Memory", "values": ["18GB RAM", "36GB RAM"]},
            {"title": "Storage", "values": ["512GB", "1TB"]},
        ],
        "variants": [
            {"title": "18GB RAM - 512GB", "sku": "MBP14-M3P-18-512", "prices": _pkr(89999900)},
            {"title": "18GB RAM - 1TB", "sku": "MBP14-M3P-18-1TB", "prices": _pkr(99999900)},
            {"title": "36GB RAM - 1TB", "sku": "MBP14-M3P-36-1TB", "prices": _pkr(119999900)},
        ],
    },
    {
        "title": 'MacBook Air 15" M2',
        "handle": "macbook-air-15-m2",
        "description": "Strikingly thin design with M2 chip. 15.3-inch Liquid Retina display.",
        "category_handle": "apple-mac",
        "images": _images("macbook-air-15-m2"),
        "options": [
            {"title": "Memory", "values": ["8GB RAM", "16GB RAM"]},
            {"title": "Storage", "values": ["256GB", "512GB"]},
        ],
        "variants": [
            {"title": "8GB RAM - 256GB", "sku": "MBA15-M2-8-256", "prices": _pkr(54999900)},
            {"title": "8GB RAM - 512GB", "sku": "MBA15-M2-8-512", "prices": _pkr(62999900)},
            {"title": "16GB RAM - 512GB", "sku": "MBA15-M2-16-512", "prices": _pkr(72999900)},
        ],
    },
    # PriceOye > Apple > Accessories
    {
        "title": "AirPods Pro (2nd Gen)",
        "handle": "airpods-pro-2",
        "description": "Active Noise Cancellation, Adaptive Audio, and USB-C charging case.",
        "category_handle": "apple-accessories",
        "images": _images("airpods-pro-2"),
        "options": [{"title": "Edition", "values": ["USB-C"]}],
        "variants": [
            {"title": "USB-C", "sku": "APP2-USB-C", "prices": _pkr(8999900)},
        ],
    },
    {
        "title": "Apple Watch Series 9",
        "handle": "apple-watch-series-9",
        "description": "S9 chip, Double Tap gesture, and brighter Always-On display.",
        "category_handle": "apple-accessories",
        "images": _images("apple-watch-series-9"),
        "options": [
            {"title": "Size", "values": ["41mm", "45mm"]},
            {"title": "Material", "values": ["Aluminum", "Stainless Steel"]},
        ],
        "variants": [
            {"title": "41mm - Aluminum", "sku": "AW9-41-ALU", "prices": _pkr(17999900)},
            {"title": "45mm - Aluminum", "sku": "AW9-45-ALU", "prices": _pkr(19999900)},
            {"title": "45mm - Stainless Steel", "sku": "AW9-45-SS", "prices": _pkr(32999900)},
        ],
    },
    # PriceOye > Samsung > Phone
    {
        "title": "Samsung Galaxy S24 Ultra",
        "handle": "samsung-galaxy-s24-ultra",
        "description": "Galaxy AI, 200MP camera, S Pen built-in, and titanium frame.",
        "category_handle": "samsung-phone",
        "images": _images("samsung-galaxy-s24-ultra"),
        "options": [
            {"title": "Storage", "values": ["256GB", "512GB", "1TB"]},
            {"title": "Color", "values": ["Titanium Black", "Titanium Gray", "Titanium Violet"]},
        ],
        "variants": [
            {"title": "256GB - Titanium Black", "sku": "S24U-256-BLK", "prices": _pkr(52999900)},
            {"title": "512GB - Titanium Black", "sku": "S24U-512-BLK", "prices": _pkr(59999900)},
            {"title": "1TB - Titanium Black", "sku": "S24U-1TB-BLK", "prices": _pkr(69999900)},
            {"title": "256GB - Titanium Gray", "sku": "S24U-256-GRY", "prices": _pkr(52999900)},
        ],
    },
    {
        "title": "Samsung Galaxy A54 5G",
        "handle": "samsung-galaxy-a54-5g",
        "description": "Mid-range champion with 5G, Super AMOLED display, and 50MP camera.",
        "category_handle": "samsung-phone",
        "images": _images("samsung-galaxy-a54-5g"),
        "options": [
            {"title": "Storage", "values": ["128GB", "256GB"]},
            {"title": "Color", "values": ["Awesome Graphite", "Awesome Lime", "Awesome Violet"]},
        ],
        "variants": [
            {"title": "128GB - Awesome Graphite", "sku": "A54-128-GRP", "prices": _pkr(14999900)},
            {"title": "256GB - Awesome Graphite", "sku": "A54-256-GRP", "prices": _pkr(17999900)},
            {"title": "128GB - Awesome Lime", "sku": "A54-128-LIM", "prices": _pkr(14999900)},
        ],
    },
    # PriceOye > Samsung > Tablet
    {
        "title": "Samsung Galaxy Tab S9 Ultra",
        "handle": "samsung-galaxy-tab-s9-ultra",
        "description": '14.6" Dynamic AMOLED 2X display, Snapdragon 8 Gen 2, S Pen included.',
        "category_handle": "samsung-tablet",
        "images": _images("samsung-galaxy-tab-s9-ultra"),
        "options": [
            {"title": "Storage", "values": ["256GB", "512GB"]},
            {"title": "Connectivity", "values": ["WiFi", "WiFi + 5G"]},
        ],
        "variants": [
            {"title": "256GB - WiFi", "sku": "TABS9U-256-WIFI", "prices": _pkr(44999900)},
            {"title": "512GB - WiFi", "sku": "TABS9U-512-WIFI", "prices": _pkr(52999900)},
            {"title": "256GB - WiFi + 5G", "sku": "TABS9U-256-5G", "prices": _pkr(52999900)},
        ],
    },
    # PriceOye > Samsung > Accessories
    {
        "title": "Samsung Galaxy Buds2 Pro",
        "handle": "samsung-galaxy-buds2-pro",
        "description": "Hi-Fi sound with 24-bit audio, ANC, and 360 Audio.",
        "category_handle": "samsung-accessories",
        "images": _images("samsung-galaxy-buds2-pro"),
        "options": [{"title": "Color", "values": ["Graphite", "White", "Bora Purple"]}],
        "variants": [
            {"title": "Graphite", "sku": "BUDS2P-GRP", "prices": _pkr(6999900)},
            {"title": "White", "sku": "BUDS2P-WHT", "prices": _pkr(6999900)},
            {"title": "Bora Purple", "sku": "BUDS2P-PRP", "prices": _pkr(6999900)},
        ],
    },
    # Merchantize > Clothing > Men
    {
        "title": "Premium Cotton T-Shirt",
        "handle": "premium-cotton-tshirt-men",
        "description": "100% premium cotton t-shirt with comfortable fit.",
        "category_handle": "clothing-men",
        "images": _images("premium-cotton-tshirt-men"),
        "options": [
            {"title": "Size", "values": ["S", "M", "L", "XL", "XXL"]},
            {"title": "Color", "values": ["Black", "White", "Navy", "Gray"]},
        ],
        "variants": [
            {"title": "M - Black", "sku": "TS-M-BLK", "prices": _pkr(149900)},
            {"title": "L - Black", "sku": "TS-L-BLK", "prices": _pkr(149900)},
            {"title": "M - White", "sku": "TS-M-WHT", "prices": _pkr(149900)},
            {"title": "XL - Navy", "sku": "TS-XL-NVY", "prices": _pkr(149900)},
        ],
    },
    {
        "title": "Slim Fit Denim Jeans",
        "handle": "slim-fit-denim-jeans-men",
        "description": "Classic slim fit jeans with stretch comfort.",
        "category_handle": "clothing-men",
        "images": _images("slim-fit-denim-jeans-men"),
        "options": [
            {"title": "Waist", "values": ["30", "32", "34", "36", "38"]},
            {"title": "Color", "values": ["Dark Blue", "Light Blue", "Black"]},
        ],
        "variants": [
            {"title": "32 - Dark Blue", "sku": "JN-32-DBL", "prices": _pkr(349900)},
            {"title": "34 - Dark Blue", "sku": "JN-34-DBL", "prices": _pkr(349900)},
            {"title": "32 - Black", "sku": "JN-32-BLK", "prices": _pkr(349900)},
        ],
    },
    # Merchantize > Clothing > Women
    {
        "title": "Floral Summer Dress",
        "handle": "floral-summer-dress-women",
        "description": "Elegant floral print dress perfect for summer occasions.",
        "category_handle": "clothing-women",
        "images": _images("floral-summer-dress-women"),
        "options": [
            {"title": "Size", "values": ["XS", "S", "M", "L", "XL"]},
            {"title": "Color", "values": ["Blue Floral", "Pink Floral", "Yellow Floral"]},
        ],
        "variants": [
            {"title": "S - Blue Floral", "sku": "FSD-S-BLU", "prices": _pkr(449900)},
            {"title": "M - Blue Floral", "sku": "FSD-M-BLU", "prices": _pkr(449900)},
            {"title": "M - Pink Floral", "sku": "FSD-M-PNK", "prices": _pkr(449900)},
        ],
    },
    # Merchantize > Footwear > Sports
    {
        "title": "Pro Runner Sports Shoes",
        "handle": "pro-runner-sports-shoes",
        "description": "Lightweight running shoes with responsive cushioning.",
        "category_handle": "footwear-sports",
        "images": _images("pro-runner-sports-shoes"),
        "options": [
            {"title": "Size", "values": ["40", "41", "42", "43", "44", "45"]},
            {"title": "Color", "values": ["Black/Red", "White/Blue", "Gray/Green"]},
        ],
        "variants": [
            {"title": "42 - Black/Red", "sku": "PRS-42-BR", "prices": _pkr(599900)},
            {"title": "43 - Black/Red", "sku": "PRS-43-BR", "prices": _pkr(599900)},
            {"title": "42 - White/Blue", "sku": "PRS-42-WB", "prices": _pkr(599900)},
        ],
    },
    # Merchantize > Footwear > Casual
    {
        "title": "Classic Canvas Sneakers",
        "handle": "classic-canvas-sneakers",
        "description": "Timeless canvas sneakers for everyday casual wear.",
        "category_handle": "footwear-casual",
        "images": _images("classic-canvas-sneakers"),
        "options": [
            {"title": "Size", "values": ["39", "40", "41", "42", "43", "44"]},
            {"title": "Color", "values": ["White", "Black", "Navy", "Red"]},
        ],
        "variants": [
            {"title": "41 - White", "sku": "CCS-41-WHT", "prices": _pkr(349900)},
            {"title": "42 - White", "sku": "CCS-42-WHT", "prices": _pkr(349900)},
            {"title": "42 - Black", "sku": "CCS-42-BLK", "prices": _pkr(349900)},
        ],
    },
]
