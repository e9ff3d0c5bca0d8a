# telekit

Plain Python building blocks for Telegram bots. It provides:

- reply and inline keyboards, with their buttons and the menu button
- Bot API data types for media, polls, payments and web apps
- handler middleware
- a typed configuration reader
- webhook settings

The package needs nothing outside the standard library.

## Installation

```
pip install telekit
```

To run the test suite:

```
pip install "telekit[test]"
pytest
```

## Keyboards (`telekit.markup`)

```python
from telekit.markup import ReplyMarkup

menu = ReplyMarkup(resize_keyboard=True)
menu.reply(
    menu.row(menu.text("Help")),
    menu.row(menu.contact("Send a contact")),
)

pager = ReplyMarkup()
pager.inline(pager.row(
    pager.data("Previous", "prev"),
    pager.data("Next", "next", "2"),
))
payload = pager.to_dict()
```

### Building buttons

`ReplyMarkup` builds `Btn` objects with these helpers:

- `text`, `data`, `url`, `query`, `query_chat`
- `contact`, `location`, `poll`
- `user`, `chat`, `login`, `web_app`

`data(text, unique, *parts)` joins the parts with `|` to form the callback data.

### Converting buttons

- `Btn.inline()` turns a button into an `InlineButton`.
- `Btn.reply()` turns it into a `ReplyButton`. It returns `None` for a button that has a unique name.

### Filling a keyboard

- `ReplyMarkup.reply(...)` fills the reply keyboard. It raises `ValueError` if a button in it carries a unique name.
- `ReplyMarkup.inline(...)` fills the inline keyboard.
- `ReplyMarkup.split(3, buttons)` groups a flat list of buttons into rows of at most three. It raises `ValueError` for a row size that is not positive.

### Other markup methods

- `ReplyMarkup.copy()` copies the markup together with its rows.
- `InlineButton.with_data(data)` returns a copy of the button carrying new callback data.

### Serialising

Every object has a `to_dict()` method that gives the JSON shape the Bot API expects:

- `ReplyMarkup`, `ReplyButton`, `InlineButton`
- `Login`, `ReplyRecipient`, `MenuButton`

`ReplyRecipient` keeps its optional flags three-state: `None` means "not sent".

## Media (`telekit.media`)

The media dataclasses are:

- `Photo`, `Audio`, `Document`, `Video`, `Animation`
- `Voice`, `VideoNote`, `Sticker`

Each of them reports its `media_type()`. Photo, audio, document, video and animation items also give an `InputMedia` through `input_media()`.

`Photo.from_dict` accepts either a single size or a list of sizes; from a list it keeps the largest one, which is the last.

`Album` is a list of media. `Album.set_caption(caption)` sets the caption on its first item.

```python
from telekit.media import Album, Photo, Location

album = Album([Photo(file_id="a"), Photo(file_id="b")])
album.set_caption("Holiday")

Location(lat=51.5, lng=-0.12).params()
# {'latitude': '51.500000', 'longitude': '-0.120000', 'live_period': '0'}
```

`Location.params()`, `Venue.params()` and `Dice.params()` return the request parameters for sending those objects. The module also defines the dice presets `CUBE`, `DART`, `BALL`, `GOAL`, `SLOT` and `BOWL`.

## Polls (`telekit.poll`)

`Poll` offers:

- `add_options(...)`
- `is_quiz()` and `is_regular()`
- `close_date()`
- `to_dict()` and `from_dict()`

`PollType.to_dict()` gives the `{"type": ...}` object used by keyboard poll buttons. `PollAnswer.from_dict` reads a poll answer.

## Payments (`telekit.payments`)

`Invoice.params()` returns the request parameters for an invoice. Prices and suggested tip amounts are encoded as JSON.

`Currency` converts amounts with its `exp` field, the number of minor digits:

- `from_total(total)` goes from minor units to major units.
- `to_total(amount)` goes from major units to minor units. It drops the fractional part of `amount` first.

The module also holds the shipping and order types: `ShippingAddress`, `ShippingQuery`, `ShippingOption`, `Price`, `Order`, `Payment` and `PreCheckoutQuery`.

## Web apps (`telekit.web_app`)

`WebApp`, `WebAppMessage`, `WebAppData` and `WriteAccessAllowed` read from and, where needed, write to their API form.

## Middleware (`telekit.middleware`)

A handler is a callable that takes a context object. A middleware takes a handler and returns a new one.

```python
from telekit.middleware import apply_middleware, whitelist, ignore_via

handler = apply_middleware(my_handler, ignore_via(), whitelist(1001, 1002))
```

`apply_middleware` makes the first middleware the outermost. `append_middleware(first, second)` joins two chains into a new list.

### Available middleware

- `logger(log=None)` logs `c.update()` as indented JSON. It uses a `to_dict()` method when there is one, and writes at INFO level to the given logger or to `logging.getLogger("telekit")`.
- `auto_respond()` calls `c.respond()` after the handler whenever `c.callback()` is not `None`.
- `ignore_via()` skips messages whose `c.message().via` is set.
- `recover(on_error=None)` catches exceptions raised by the handler and passes them to `on_error(err, c)`. Without `on_error`, it calls `c.bot().on_error(err, c)`.
- `restrict(RestrictConfig(chats=[...], in_=..., out=...))` routes by whether the sender's id is in `chats`. The sender comes from `c.sender()`; its id is read as a mapping key `"id"` or as an attribute `id`. A handler left as `None` falls back to the wrapped one.
- `blacklist(*ids)` and `whitelist(*ids)` drop updates from the listed senders, or from everyone else.

### The context object

The middleware relies only on the context methods named above:

- `update()`, `callback()`, `respond()`
- `message()`, `sender()`, `bot()`

Any object that provides them will do.

## Configuration (`telekit.config`)

```python
from telekit.config import Config, parse_duration

cfg = Config({"num": 123, "obj": {"dur": "10m"}, "nums": [1, 2]})
cfg.integer("num")               # 123
cfg.get("obj").duration("dur")   # timedelta(minutes=10)
cfg.duration("obj.dur")          # same, via a dotted path
cfg.integers("nums")             # [1, 2]
parse_duration("1h30m")          # timedelta(hours=1, minutes=30)
```

Keys are case-insensitive and may be dotted paths.

### Reading values

Typed readers:

- single values: `string`, `integer`, `floating`, `boolean`, `duration`, `chat_id`
- lists: `strings`, `integers`, `floats`

A missing or unconvertible value gives the type's zero value.

Sections:

- `get(key)` returns a child `Config`.
- `slice(key)` returns a list of child `Config` objects.
- Both return `None` when the value has another shape.

### Durations

`duration` reads plain numbers as nanoseconds. It reads strings with the units `ns`, `us`/`µs`, `ms`, `s`, `m` and `h`.

`parse_duration` raises `ValueError` on malformed input.

## Webhooks (`telekit.webhook`)

`Webhook` holds webhook settings:

- `params()` returns the parameters for a `setWebhook` request. The URL is `https://` when `tls` is set and `http://` otherwise. A `WebhookEndpoint` replaces the URL with its `public_url`.
- `certificate()` returns the path of the certificate to upload, or `None`.
- `Webhook.from_dict` reads the webhook status reported by the API.

## What the package does not do

The package only builds and reads data; it does not talk to Telegram:

- It sends no API requests.
- It runs no long polling.
- It serves no webhook HTTP endpoint.
- It does not dispatch updates to handlers.

It has no message or update model of its own. Fields that refer to users and chats are kept as plain dictionaries. Sending, receiving and routing are left to the bot client that uses these pieces.