from fastapi import Request

from restaurantos.crud import MenuCatalog, OrderStore, Restaurant, TableStore


def get_restaurant(request: Request) -> Restaurant:
    return request.app.state.restaurant


def get_menu(request: Request) -> MenuCatalog:
    return get_restaurant(request).menu


def get_tables(request: Request) -> TableStore:
    return get_restaurant(request).tables


def get_orders(request: Request) -> OrderStore:
    return get_restaurant(request).orders
