"""Starter catalog used when no persisted catalog is available."""

from __future__ import annotations

from typing import TYPE_CHECKING, NamedTuple

from ...domain.catalog.entities import Episode, Release, Track

if TYPE_CHECKING:
    from ...domain.catalog.index import CatalogIndex


class StarterRelease(NamedTuple):
    author: str
    genres: tuple[str, ...]
    title: str
    year: int
    tracks: tuple[tuple[str, int], ...]


class StarterEpisode(NamedTuple):
    title: str
    duration_seconds: int
    host: str
    episode_number: int


STARTER_RELEASES: tuple[StarterRelease, ...] = (
    StarterRelease(
        "Queen", ("Rock", "Classic Rock"), "A Night at the Opera", 1975,
        (("Bohemian Rhapsody", 354), ("Love of My Life", 219)),
    ),
    StarterRelease(
        "Eagles", ("Rock", "Country Rock"), "Hotel California", 1976,
        (("Hotel California", 390),),
    ),
    StarterRelease(
        "Ed Sheeran", ("Pop", "Folk"), "÷ (Divide)", 2017,
        (("Shape of You", 233), ("Castle on the Hill", 261)),
    ),
    StarterRelease(
        "The Weeknd", ("R&B", "Pop"), "After Hours", 2020,
        (("Blinding Lights", 200), ("Save Your Tears", 215)),
    ),
    StarterRelease(
        "Daft Punk", ("Electronic", "House"), "Random Access Memories", 2013,
        (("Get Lucky", 369), ("Instant Crush", 337)),
    ),
    StarterRelease(
        "Luiz Gonzaga", ("Forró", "Baião"), "O Rei do Baião", 1950,
        (
            ("Asa Branca", 195),
            ("O Xote das Meninas", 230),
            ("Pagode Russo", 210),
            ("A Vida do Viajante", 245),
            ("Numa Sala de Reboco", 188),
        ),
    ),
    StarterRelease(
        "Dominguinhos", ("Forró", "Xote"), "Dominguinhos Ao Vivo", 2000,
        (
            ("Eu Só Quero um Xodó", 205),
            ("Gostoso Demais", 220),
            ("Isso Aqui Tá Bom Demais", 195),
            ("De Volta Pro Aconchego", 240),
        ),
    ),
    StarterRelease(
        "Alceu Valença", ("MPB", "Forró"), "Cavalo de Pau", 1982,
        (
            ("Anunciação", 250),
            ("Tropicana (Morena Tropicana)", 215),
            ("La Belle De Jour", 260),
            ("Coração Bobo", 230),
            ("Pelas Ruas que Andei", 245),
        ),
    ),
    StarterRelease(
        "Zé Ramalho", ("MPB", "Folk Brasileiro"), "Avohai", 1978,
        (
            ("Chão de Giz", 270),
            ("Avohai", 300),
            ("Frevo Mulher", 220),
            ("Admirável Gado Novo", 290),
            ("Sinônimos", 310),
        ),
    ),
    StarterRelease(
        "Elba Ramalho", ("MPB", "Forró"), "O Grande Encontro", 1996,
        (("Banho de Cheiro", 200), ("Bate Coração", 210), ("Ai Que Saudade de Ocê", 235)),
    ),
    StarterRelease(
        "Gilberto Gil", ("MPB", "Tropicália"), "Realce", 1979,
        (
            ("Aquele Abraço", 280),
            ("Esperando na Janela", 245),
            ("Andar com Fé", 210),
            ("Vamos Fugir", 260),
        ),
    ),
    StarterRelease(
        "Caetano Veloso", ("MPB", "Tropicália"), "Transa", 1972,
        (("Sozinho", 250), ("Leãozinho", 205), ("Você é Linda", 270), ("Reconvexo", 240)),
    ),
    StarterRelease(
        "Chico Science & Nação Zumbi", ("Manguebeat", "Rock"), "Da Lama ao Caos", 1994,
        (
            ("Da Lama ao Caos", 230),
            ("A Praieira", 215),
            ("Manguetown", 225),
            ("Maracatu Atômico", 244),
        ),
    ),
    StarterRelease(
        "Ivete Sangalo", ("Axé", "Pop"), "Festa", 2005,
        (("Sorte Grande", 205), ("Festa", 210), ("Quando a Chuva Passar", 230), ("Abalou", 220)),
    ),
    StarterRelease(
        "Reginaldo Rossi", ("Brega",), "O Rei do Brega", 1987,
        (("Garçom", 240), ("A Raposa e as Uvas", 215), ("Em Plena Lua de Mel", 225)),
    ),
    StarterRelease(
        "Fagner", ("MPB",), "Romance no Deserto", 1987,
        (("Borbulhas de Amor", 235), ("Deslizes", 250), ("Canteiros", 240)),
    ),
    StarterRelease(
        "Belchior", ("MPB",), "Alucinação", 1976,
        (
            ("Apenas um Rapaz Latino-Americano", 255),
            ("Como Nossos Pais", 280),
            ("Velha Roupa Colorida", 260),
        ),
    ),
    StarterRelease(
        "Novos Baianos", ("MPB", "Rock"), "Acabou Chorare", 1972,
        (("Preta Pretinha", 225), ("Mistério do Planeta", 240), ("A Menina Dança", 235)),
    ),
    StarterRelease(
        "Banda Calypso", ("Calypso", "Brega"), "Volume 1", 1999,
        (("A Lua Me Traiu", 210), ("Dançando Calypso", 200)),
    ),
    StarterRelease(
        "Olodum", ("Samba-Reggae",), "Egito Madagascar", 1987,
        (("Faraó", 250), ("Requebra", 230)),
    ),
)

STARTER_EPISODES: tuple[StarterEpisode, ...] = (
    StarterEpisode("Tech News #1", 1200, "TechDaily", 1),
    StarterEpisode("História do Java", 3600, "DevCast", 42),
    StarterEpisode("Carreira em TI", 2400, "DevCast", 43),
)


def seed_starter_catalog(catalog: CatalogIndex) -> int:
    """Populate an empty catalog with the starter data.

    Authors go through the catalog's author cache, so seeding next to
    existing authors reuses them. A non-empty catalog is left untouched.

    Returns:
        Number of items added.
    """
    if not catalog.is_empty:
        return 0

    added = 0
    for entry in STARTER_RELEASES:
        author = catalog.get_or_create_author(entry.author, entry.genres)
        release = Release(title=entry.title, author=author, year=entry.year)
        for title, duration in entry.tracks:
            track = Track(title=title, duration_seconds=duration, author=author, release=release)
            release.add_track(track)
            catalog.add_item(track)
            added += 1

    for episode in STARTER_EPISODES:
        catalog.add_item(
            Episode(
                title=episode.title,
                duration_seconds=episode.duration_seconds,
                host=episode.host,
                episode_number=episode.episode_number,
            )
        )
        added += 1

    return added
