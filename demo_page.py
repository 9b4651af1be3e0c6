"""
Demo Page Assembly

Builds example/src/Test.elm, a Browser.sandbox page showing every generated
icon in the selected weight next to all six weights.
"""

from typing import Sequence

from weights import Weight

MIN_SIZE = 4
MAX_SIZE = 2000
DEFAULT_SIZE = 128
INITIAL_SIZE = 64

DEMO_TEMPLATE = """\
module Test exposing (..)

import Browser
import Html exposing (..)
import Html.Attributes exposing (..)
import Html.Events exposing (onClick, onInput)
import MODULE exposing (IconWeight(..), toHtml)



-- MAIN


main =
    Browser.sandbox { init = init, update = update, view = view }



-- MODEL


type alias Model =
    { weight : IconWeight
    , size : Float
    }


init : Model
init =
    Model Thin INITIAL_SIZE



-- UPDATE


type Msg
    = SetWeight String
    | SetSize String
    | Reset
    | NoOp


update : Msg -> Model -> Model
update msg model =
    case msg of
        SetWeight weight ->
            { model | weight = parseWeight weight }

        SetSize size ->
            { model | size = clamp MIN_SIZE MAX_SIZE (size |> String.toFloat |> Maybe.withDefault DEFAULT_SIZE) }

        Reset ->
            init

        NoOp ->
            model


parseWeight : String -> IconWeight
parseWeight weight =
    case weight of
PARSE_WEIGHT_BRANCHES
        _ ->
            Regular


css =
    \"\"\"
    body {
        color: white;
        background-color: #35313D;
        font-family: monospace;
    }

    h2 {
        color: darkgrey;
    }

    .row {
        display: flex;
        justify-content: center;
        gap: 32px;
        margin: 32px;
    }
    \"\"\"



-- VIEW


view : Model -> Html Msg
view model =
    let
        fontSize =
            String.fromFloat model.size ++ "px"
    in
    div
        [ style "font-size" fontSize ]
        [ Html.node "style" [] [ text css ]
        , div
            [ style "position" "fixed"
            , style "bottom" "0"
            , style "left" "0"
            , style "right" "0"
            , style "z-index" "1"
            , style "display" "flex"
            , style "gap" "16px"
            , style "justify-content" "center"
            , style "align-items" "center"
            , style "padding" "16px"
            ]
            [ select [ onInput SetWeight, style "height" "21px" ]
WEIGHT_OPTIONS
                ]
            , input
                [ type_ "number"
                , placeholder "Size"
                , value <| String.fromFloat model.size
                , onInput SetSize
                ]
                []
            , button
                [ onClick Reset ]
                [ text "Reset" ]
            ]
ICON_ROWS
        ]
"""


def _parse_weight_branches() -> str:
    branches = []
    for weight in Weight:
        if weight is Weight.REGULAR:
            continue
        branches.append(f'        "{weight.value}" ->\n            {weight.label}\n')
    return "\n".join(branches)


def _weight_options() -> str:
    options = [f'option [ value "{weight.value}" ] [ text "{weight.label}" ]' for weight in Weight]
    return "                [ " + "\n                , ".join(options)


def _icon_row(module_name: str, name: str) -> str:
    cells = [f"{module_name}.{name} model.weight |> toHtml []"]
    cells += [f"{module_name}.{name} {weight.label} |> toHtml []" for weight in Weight]
    return (
        '        , div [ class "row" ]\n'
        + "            [ " + "\n            , ".join(cells) + "\n"
        + "            ]"
    )


def assemble_demo_page(names: Sequence[str], module_name: str = "Phosphor") -> str:
    """
    Assemble the demo page for the given exported icon names.

    Args:
        names: Generated icon function names, in display order
        module_name: Name of the generated icon module

    Returns:
        Elm source text of the Test module
    """
    rows = "\n".join(_icon_row(module_name, name) for name in names)
    return (
        DEMO_TEMPLATE
        .replace("MODULE", module_name)
        .replace("INITIAL_SIZE", str(INITIAL_SIZE))
        .replace("MIN_SIZE", str(MIN_SIZE))
        .replace("MAX_SIZE", str(MAX_SIZE))
        .replace("DEFAULT_SIZE", str(DEFAULT_SIZE))
        .replace("PARSE_WEIGHT_BRANCHES", _parse_weight_branches())
        .replace("WEIGHT_OPTIONS", _weight_options())
        .replace("ICON_ROWS\n", rows + "\n" if rows else "")
    )
