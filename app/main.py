import logging
import os

from kivy.app import App
from kivy.uix.screenmanager import ScreenManager, NoTransition

from app.screens.main import GeneratorScreen
import app.const
from handgen import util


__version__ = '0.1.0'

DEBUG = os.getenv('DEBUG')

lgr = logging


class HandGenApp(App):
    title = 'Bridge Hand Generator'

    def build(self):
        util.setup_basic_logging()
        self.handgen = ScreenManager(transition=NoTransition())
        self.main_screen = GeneratorScreen(name=app.const.MAIN_SCREEN)
        self.handgen.add_widget(self.main_screen)
        lgr.debug("Built app (DEBUG=%s)", DEBUG)
        return self.handgen


def run():
    HandGenApp().run()


if __name__ == '__main__':
    run()
