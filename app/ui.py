"""Some UI helpers"""
import random
from kivy.uix.button import Button
from kivy.uix.label import Label
from kivy.uix.popup import Popup
from kivy.uix.boxlayout import BoxLayout

from handgen import cards
from handgen import table

SUIT_UNICODE_MAP = {
    cards.SUIT_S: '\u2660',
    cards.SUIT_H: '\u2661',
    cards.SUIT_D: '\u2662',
    cards.SUIT_C: '\u2663',
}


class PopupLabel(Label):
    pass


def popup(title, msg, close_btn=False, auto_dismiss=False):
    content = BoxLayout(orientation='vertical')

    label = PopupLabel(text=str(msg), valign='center', halign='center')
    content.add_widget(label)
    if close_btn:
        button = Button(text='Close', size_hint=(1, None))
        content.add_widget(button)

    popup = Popup(
        title=title.title(), content=content,
        size_hint=(.8, .3), auto_dismiss=auto_dismiss)
    popup.open()

    if close_btn:
        button.bind(on_release=popup.dismiss)

    return popup


def display_suit(suit, unicode=False):
    return SUIT_UNICODE_MAP[suit] if unicode else suit


def board_caption(board):
    dealer = cards.SEAT_NAMES[board.dealer]
    vul = table.VUL_NAMES[board.vulnerability]
    return f"Board {board.number}  Dealer {dealer}  Vul {vul}"


def random_tip():
    return random.choice([
        "Voids are rare; a suit capped at 0 cards makes generation much slower.",
        "Dealer constraints follow each board's dealer, so boards are dealt one by one.",
        "If nothing is found in time, loosen a bound or ask for fewer boards.",
    ])
