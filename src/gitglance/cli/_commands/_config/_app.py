from cyclopts import App

app = App(name="config", help="Inspect gitglance configuration")
