from cyclopts import App

app = App(name="discover", help="Find working copies and compare them with the config")
