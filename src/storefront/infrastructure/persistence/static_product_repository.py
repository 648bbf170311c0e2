"""In-process implementation of ProductRepository seeded with the shop catalog."""

from __future__ import annotations

from decimal import Decimal

from storefront.domain.model.product import Product
from storefront.domain.repository.product_repository import ProductRepository

_BUNNY_GIRL = "Rascal Does Not Dream of Bunny Girl Senpai"
_ALYA = "Tokidoki Bosotto Russia-go de Dereru Tonari no Alya-san"
_DEMON_SLAYER = "Demon Slayer"
_QUINTUPLETS = "The Quintessential Quintuplets"

CATALOG: tuple[Product, ...] = (
    Product(1, "Mai Sakurajima", _BUNNY_GIRL, Decimal("250"), "images/mai-sakurajima.png"),
    Product(2, "Suou Yuki", _ALYA, Decimal("260"), "images/marin-my-dress-up-darling.png"),
    Product(3, "Asuna Yuuki", "Sword Art Online", Decimal("270"), "images/asuna-sword-art-online.png"),
    Product(4, "Zero Two", "Darling in the FranXX", Decimal("290"), "images/zero-two-darling-in-the-franxx.png"),
    Product(5, "Alisa Mikhailovna", _ALYA, Decimal("300"), "images/saber-fate.png"),
    Product(6, "Nezuko Kamado", _DEMON_SLAYER, Decimal("280"), "images/nezuko-demon-slayer.png"),
    Product(7, "Kaguya Shinomiya", "Kaguya-sama: Love is War", Decimal("250"), "images/kaguya-love-is-war.png"),
    Product(8, "Nino Nakano", _QUINTUPLETS, Decimal("265"), "images/nino-nakano.png"),
    Product(9, "Miku Nakano", _QUINTUPLETS, Decimal("270"), "images/miku-nakano.png"),
    Product(10, "Yotsuba Nakano", _QUINTUPLETS, Decimal("275"), "images/yotsuba-nakano.png"),
    Product(11, "Itsuki Nakano", _QUINTUPLETS, Decimal("280"), "images/itsuki-nakano.png"),
    Product(12, "Ichika Nakano", _QUINTUPLETS, Decimal("260"), "images/ichika-nakano.png"),
    Product(13, "Suma", _DEMON_SLAYER, Decimal("250"), "images/suma.png"),
    Product(14, "Rio Futaba", _BUNNY_GIRL, Decimal("245"), "images/rio-futaba.png"),
    Product(15, "Kaede Azusagawa", _BUNNY_GIRL, Decimal("245"), "images/kaede-azusagawa.png"),
    Product(16, "Alya Kujou", _ALYA, Decimal("260"), "images/alya-kujou.png"),
    Product(17, "Yuki Suou", _ALYA, Decimal("260"), "images/makio.png"),
    Product(18, "Shinobu Kocho", _DEMON_SLAYER, Decimal("280"), "images/shinobu-kocho.png"),
    Product(19, "Mitsuri Kanroji", _DEMON_SLAYER, Decimal("290"), "images/mitsuri-kanroji.png"),
    Product(20, "Tamayo", _DEMON_SLAYER, Decimal("275"), "images/tamayo.png"),
)


class StaticProductRepository(ProductRepository):

    def __init__(self, products: tuple[Product, ...] = CATALOG) -> None:
        self._products = {p.id: p for p in products}

    def get_by_id(self, product_id: int) -> Product | None:
        return self._products.get(product_id)

    def list_all(self) -> list[Product]:
        return list(self._products.values())
