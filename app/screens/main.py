import logging
import pathlib

from kivy.app import App
from kivy.clock import Clock
from kivy.lang import Builder
from kivy.properties import ObjectProperty, NumericProperty, StringProperty, BooleanProperty
from kivy.uix.boxlayout import BoxLayout
from kivy.uix.gridlayout import GridLayout
from kivy.uix.label import Label
from kivy.uix.screenmanager import Screen
from kivy.uix.textinput import TextInput

from app import const, ui
from handgen import boards
from handgen import cards
from handgen import constraints as cs
from handgen import session
from handgen import table


lgr = logging


LAYOUT = """
#:kivy 2.2.1
#:import boards handgen.boards
#:import cs handgen.constraints
#:import table handgen.table
#:import const app.const

<GeneratorScreen>:
    orientation: 'vertical'
    padding: (10, 10, 10, 10)
    spacing: 5

    num_input: num_input
    policy_spinner: policy_spinner
    default_vul_spinner: default_vul_spinner
    hcp_mode_spinner: hcp_mode_spinner
    dist_mode_spinner: dist_mode_spinner
    hcp_grid: hcp_grid
    dist_grid: dist_grid
    board_list: board_list
    button_box: button_box

    GridLayout:
        cols: 2
        size_hint_y: None
        height: self.minimum_height
        row_default_height: '40dp'
        row_force_default: True

        Label:
            text: 'Boards to add'
        TextInput:
            id: num_input
            text: const.DEFAULT_NUM_BOARDS_TEXT
            input_filter: 'int'
            multiline: False

        Spinner:
            id: policy_spinner
            text: boards.POLICY_ROTATING
            values: boards.POLICIES
        Spinner:
            id: default_vul_spinner
            text: table.VUL_NONE
            values: table.VULNERABILITIES
            disabled: policy_spinner.text != boards.POLICY_FIXED

        Spinner:
            id: hcp_mode_spinner
            text: cs.MODE_NONE
            values: cs.MODES
        Spinner:
            id: dist_mode_spinner
            text: cs.MODE_NONE
            values: cs.MODES

    ScrollView:
        BoxLayout:
            orientation: 'vertical'
            size_hint_y: None
            height: self.minimum_height
            spacing: 5

            RangeGrid:
                id: hcp_grid
            RangeGrid:
                id: dist_grid
            BoxLayout:
                id: board_list
                orientation: 'vertical'
                size_hint_y: None
                height: self.minimum_height

    ButtonBox:
        id: button_box

        add_button: add_button
        new_button: new_button
        clear_button: clear_button
        save_button: save_button

        Button:
            id: add_button
            text: 'Add boards'
            on_release: root.generate(replace=False)
        Button:
            id: new_button
            text: 'New set'
            on_release: root.generate(replace=True)
        Button:
            id: clear_button
            text: 'Clear'
            on_release: root.clear_boards()
        Button:
            id: save_button
            text: 'Save LIN'
            on_release: root.save_lin()

<ButtonBox>:
    size_hint_y: None
    height: '48dp'
    spacing: 5

<RangeGrid>:
    cols: 3
    size_hint_y: None
    height: self.minimum_height
    row_default_height: '36dp'
    row_force_default: True

<BoardRow>:
    size_hint_y: None
    height: '40dp'
    spacing: 2

    Label:
        text: root.caption
        size_hint_x: 0.5
    Button:
        text: 'Up'
        size_hint_x: 0.1
        disabled: root.index == 0
        on_release: root.screen.move_board(root.index, root.index - 1)
    Button:
        text: 'Down'
        size_hint_x: 0.1
        disabled: root.is_last
        on_release: root.screen.move_board(root.index, root.index + 1)
    Button:
        text: 'Vul'
        size_hint_x: 0.15
        disabled: not root.vul_editable
        on_release: root.screen.cycle_vulnerability(root.index)
    Button:
        text: 'Delete'
        size_hint_x: 0.15
        on_release: root.screen.delete_board(root.index)

<PopupLabel>:
    # https://stackoverflow.com/questions/66018633/is-there-a-way-to-adjust-the-size-of-content-in-a-kivy-popup
    text_size: self.size
"""


class GeneratorScreen(BoxLayout, Screen):
    num_input = ObjectProperty(None)
    policy_spinner = ObjectProperty(None)
    default_vul_spinner = ObjectProperty(None)
    hcp_mode_spinner = ObjectProperty(None)
    dist_mode_spinner = ObjectProperty(None)
    hcp_grid = ObjectProperty(None)
    dist_grid = ObjectProperty(None)
    board_list = ObjectProperty(None)
    button_box = ObjectProperty(None)

    def __init__(self, **kwargs):
        Builder.load_string(LAYOUT)
        super().__init__(**kwargs)

        self.session = session.DealSession()

        self.policy_spinner.bind(text=lambda _, value: self.set_policy(value))
        self.default_vul_spinner.bind(text=lambda _, value: self.set_default_vulnerability(value))
        self.hcp_mode_spinner.bind(text=lambda _, value: self.hcp_grid.set_rows(cs.MEASURE_HCP, value))
        self.dist_mode_spinner.bind(text=lambda _, value: self.dist_grid.set_rows(cs.MEASURE_DIST, value))

    # generation #

    def generate(self, replace=False):
        if self.session.generating:
            return

        self.button_box.set_disabled(True)
        pp = ui.popup("Generating", f"Tip: {ui.random_tip()}")
        Clock.schedule_once(lambda dt: self._generate(replace, pp))  # so that popup is instantly shown

    def _generate(self, replace, pp):
        try:
            self.session.hcp = self.hcp_grid.constraints(cs.MEASURE_HCP, self.hcp_mode_spinner.text)
            self.session.dist = self.dist_grid.constraints(cs.MEASURE_DIST, self.dist_mode_spinner.text)
            num_boards = self.num_input.text or const.DEFAULT_NUM_BOARDS_TEXT
            if replace:
                new_boards = self.session.new_boards(num_boards)
            else:
                new_boards = self.session.add_boards(num_boards)
        finally:
            pp.dismiss()
            self.button_box.set_disabled(False)

        if new_boards is None:
            ui.popup("Generation failed", msg=self.session.error, close_btn=True)
            return

        self.refresh_boards()

    # lifecycle #

    def set_policy(self, policy):
        self.session.collection.set_policy(policy)
        self.refresh_boards()

    def set_default_vulnerability(self, value):
        self.session.collection.set_default_vulnerability(value)

    def delete_board(self, index):
        self.session.collection.delete(index)
        self.refresh_boards()

    def move_board(self, source, target):
        self.session.collection.move(source, target)
        self.refresh_boards()

    def cycle_vulnerability(self, index):
        board = self.session.collection[index]
        vuls = table.VULNERABILITIES
        next_vul = vuls[(vuls.index(board.vulnerability) + 1) % len(vuls)]
        self.session.collection.set_vulnerability(index, next_vul)
        self.refresh_boards()

    def clear_boards(self):
        self.session.collection.clear()
        self.refresh_boards()

    def save_lin(self):
        path = pathlib.Path(App.get_running_app().user_data_dir)/const.LIN_FILENAME
        try:
            self.session.save_lin(path, force=True)
        except (ValueError, OSError) as e:
            lgr.exception("Saving LIN failed")
            ui.popup("Saving failed", msg=e, close_btn=True)
            return

        ui.popup("Saved", msg=f"{len(self.session.collection)} boards saved to {path}", close_btn=True)

    def refresh_boards(self):
        self.board_list.clear_widgets()
        collection = self.session.collection
        vul_editable = collection.policy == boards.POLICY_FIXED
        for index, board in enumerate(collection):
            row = BoardRow(screen=self, index=index, caption=ui.board_caption(board),
                           is_last=index == len(collection) - 1, vul_editable=vul_editable)
            self.board_list.add_widget(row)
        lgr.debug("Showing %s boards", len(collection))


class ButtonBox(BoxLayout):
    add_button = ObjectProperty(None)
    new_button = ObjectProperty(None)
    clear_button = ObjectProperty(None)
    save_button = ObjectProperty(None)

    def set_disabled(self, disabled):
        for button in (self.add_button, self.new_button, self.clear_button, self.save_button):
            button.disabled = disabled


class RangeGrid(GridLayout):
    """Min/max inputs, one row per constraint cell."""

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self.inputs = {}

    def set_rows(self, measure, mode):
        self.clear_widgets()
        self.inputs = {}
        for key in cs.cell_keys(measure, mode):
            self.add_widget(Label(text=self._label(measure, key)))
            min_input = TextInput(hint_text='min', input_filter='int', multiline=False)
            max_input = TextInput(hint_text='max', input_filter='int', multiline=False)
            self.add_widget(min_input)
            self.add_widget(max_input)
            self.inputs[key] = (min_input, max_input)

    def constraints(self, measure, mode) -> cs.ConstraintSet:
        raw_cells = {key: (lo.text, hi.text) for key, (lo, hi) in self.inputs.items()}
        if not raw_cells:
            return cs.no_constraints(measure)
        return cs.build(measure, mode, raw_cells)

    @staticmethod
    def _label(measure, key):
        who, suit = key
        who = cards.SEAT_NAMES.get(who, who.title())
        if measure == cs.MEASURE_HCP:
            return f"{who} HCP"
        return f"{who} {ui.display_suit(suit, unicode=True)}"


class BoardRow(BoxLayout):
    screen = ObjectProperty(None)
    index = NumericProperty(0)
    caption = StringProperty('')
    is_last = BooleanProperty(False)
    vul_editable = BooleanProperty(False)
