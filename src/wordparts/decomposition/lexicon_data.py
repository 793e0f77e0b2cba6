"""
參考詞庫資料（純資料）

每個條目: 單字 -> (音節, 音節發音提示, 詞素, 詞素發音提示, 詞素角色)

- 音節依「說出來的聲音」切分，不一定與詞素邊界一致
- 發音提示遇到弱化母音用 /uh/，-tion/-sion 用 "shun"
- 所有平行序列等長，且各維度串接後等於單字（由 ReferenceLexicon.validate 檢查）
"""

LEXICON_DATA = {
    # port root
    "transport": (
        ("trans", "port"),
        ("/tranz/", "/port/"),
        ("trans", "port"),
        ("/tranz/", "/port/"),
        ("prefix", "root"),
    ),
    "portable": (
        ("por", "ta", "ble"),
        ("/por/", "/tuh/", "/buhl/"),
        ("port", "able"),
        ("/port/", "/uh-buhl/"),
        ("root", "suffix"),
    ),
    "import": (
        ("im", "port"),
        ("/im/", "/port/"),
        ("im", "port"),
        ("/im/", "/port/"),
        ("prefix", "root"),
    ),
    "report": (
        ("re", "port"),
        ("/rih/", "/port/"),
        ("re", "port"),
        ("/rih/", "/port/"),
        ("prefix", "root"),
    ),
    "export": (
        ("ex", "port"),
        ("/eks/", "/port/"),
        ("ex", "port"),
        ("/eks/", "/port/"),
        ("prefix", "root"),
    ),
    "portfolio": (
        ("port", "fo", "li", "o"),
        ("/port/", "/foh/", "/lee/", "/oh/"),
        ("port", "folio"),
        ("/port/", "/foh-lee-oh/"),
        ("root", "root"),
    ),

    # vis root
    "visible": (
        ("vis", "i", "ble"),
        ("/viz/", "/ih/", "/buhl/"),
        ("vis", "ible"),
        ("/viz/", "/ih-buhl/"),
        ("root", "suffix"),
    ),
    "invisible": (
        ("in", "vis", "i", "ble"),
        ("/in/", "/viz/", "/ih/", "/buhl/"),
        ("in", "vis", "ible"),
        ("/in/", "/viz/", "/ih-buhl/"),
        ("prefix", "root", "suffix"),
    ),
    "revise": (
        ("re", "vise"),
        ("/rih/", "/vize/"),
        ("re", "vise"),
        ("/rih/", "/vize/"),
        ("prefix", "root"),
    ),
    "supervise": (
        ("su", "per", "vise"),
        ("/soo/", "/per/", "/vize/"),
        ("super", "vise"),
        ("/soo-per/", "/vize/"),
        ("prefix", "root"),
    ),
    "preview": (
        ("pre", "view"),
        ("/pree/", "/vyoo/"),
        ("pre", "view"),
        ("/pree/", "/vyoo/"),
        ("prefix", "root"),
    ),
    "vision": (
        ("vi", "sion"),
        ("/vizh/", "/uhn/"),
        ("vis", "ion"),
        ("/viz/", "/yuhn/"),
        ("root", "suffix"),
    ),
    "revision": (
        ("re", "vi", "sion"),
        ("/rih/", "/vizh/", "/uhn/"),
        ("re", "vis", "ion"),
        ("/rih/", "/viz/", "/yuhn/"),
        ("prefix", "root", "suffix"),
    ),

    # rupt root
    "interrupt": (
        ("in", "ter", "rupt"),
        ("/in/", "/ter/", "/rupt/"),
        ("inter", "rupt"),
        ("/in-ter/", "/rupt/"),
        ("prefix", "root"),
    ),
    "erupt": (
        ("e", "rupt"),
        ("/ih/", "/rupt/"),
        ("e", "rupt"),
        ("/ih/", "/rupt/"),
        ("prefix", "root"),
    ),
    "disrupt": (
        ("dis", "rupt"),
        ("/dis/", "/rupt/"),
        ("dis", "rupt"),
        ("/dis/", "/rupt/"),
        ("prefix", "root"),
    ),
    "corrupt": (
        ("cor", "rupt"),
        ("/kor/", "/rupt/"),
        ("cor", "rupt"),
        ("/kor/", "/rupt/"),
        ("prefix", "root"),
    ),
    "disruption": (
        ("dis", "rup", "tion"),
        ("/dis/", "/rup/", "/shun/"),
        ("dis", "rupt", "ion"),
        ("/dis/", "/rupt/", "/shun/"),
        ("prefix", "root", "suffix"),
    ),
    "eruptive": (
        ("e", "rup", "tive"),
        ("/ih/", "/rup/", "/tiv/"),
        ("e", "rupt", "ive"),
        ("/ih/", "/rupt/", "/tiv/"),
        ("prefix", "root", "suffix"),
    ),

    # scrib / script root
    "describe": (
        ("de", "scribe"),
        ("/dih/", "/skribe/"),
        ("de", "scribe"),
        ("/dih/", "/skribe/"),
        ("prefix", "root"),
    ),
    "prescription": (
        ("pre", "scrip", "tion"),
        ("/pree/", "/skrip/", "/shun/"),
        ("pre", "script", "ion"),
        ("/pree/", "/skript/", "/shun/"),
        ("prefix", "root", "suffix"),
    ),
    "inscription": (
        ("in", "scrip", "tion"),
        ("/in/", "/skrip/", "/shun/"),
        ("in", "script", "ion"),
        ("/in/", "/skript/", "/shun/"),
        ("prefix", "root", "suffix"),
    ),
    "manuscript": (
        ("man", "u", "script"),
        ("/man/", "/yoo/", "/skript/"),
        ("manu", "script"),
        ("/man-yoo/", "/skript/"),
        ("root", "root"),
    ),
    "description": (
        ("de", "scrip", "tion"),
        ("/dih/", "/skrip/", "/shun/"),
        ("de", "script", "ion"),
        ("/dih/", "/skript/", "/shun/"),
        ("prefix", "root", "suffix"),
    ),
    "subscription": (
        ("sub", "scrip", "tion"),
        ("/sub/", "/skrip/", "/shun/"),
        ("sub", "script", "ion"),
        ("/sub/", "/skript/", "/shun/"),
        ("prefix", "root", "suffix"),
    ),

    # dict root
    "predict": (
        ("pre", "dict"),
        ("/prih/", "/dikt/"),
        ("pre", "dict"),
        ("/prih/", "/dikt/"),
        ("prefix", "root"),
    ),
    "contradiction": (
        ("con", "tra", "dic", "tion"),
        ("/kon/", "/truh/", "/dik/", "/shun/"),
        ("contra", "dict", "ion"),
        ("/kon-truh/", "/dikt/", "/shun/"),
        ("prefix", "root", "suffix"),
    ),
    "dictate": (
        ("dic", "tate"),
        ("/dik/", "/tayt/"),
        ("dict", "ate"),
        ("/dikt/", "/ayt/"),
        ("root", "suffix"),
    ),
    "prediction": (
        ("pre", "dic", "tion"),
        ("/prih/", "/dik/", "/shun/"),
        ("pre", "dict", "ion"),
        ("/prih/", "/dikt/", "/shun/"),
        ("prefix", "root", "suffix"),
    ),
    "dictator": (
        ("dic", "ta", "tor"),
        ("/dik/", "/tay/", "/ter/"),
        ("dict", "ator"),
        ("/dikt/", "/ay-ter/"),
        ("root", "suffix"),
    ),

    # struct root
    "instruct": (
        ("in", "struct"),
        ("/in/", "/strukt/"),
        ("in", "struct"),
        ("/in/", "/strukt/"),
        ("prefix", "root"),
    ),
    "construction": (
        ("con", "struc", "tion"),
        ("/kon/", "/struk/", "/shun/"),
        ("con", "struct", "ion"),
        ("/kon/", "/strukt/", "/shun/"),
        ("prefix", "root", "suffix"),
    ),
    "destructive": (
        ("de", "struc", "tive"),
        ("/dih/", "/struk/", "/tiv/"),
        ("de", "struct", "ive"),
        ("/dih/", "/strukt/", "/tiv/"),
        ("prefix", "root", "suffix"),
    ),
    "infrastructure": (
        ("in", "fra", "struc", "ture"),
        ("/in/", "/fruh/", "/struk/", "/cher/"),
        ("infra", "struct", "ure"),
        ("/in-fruh/", "/strukt/", "/cher/"),
        ("prefix", "root", "suffix"),
    ),
    "instruction": (
        ("in", "struc", "tion"),
        ("/in/", "/struk/", "/shun/"),
        ("in", "struct", "ion"),
        ("/in/", "/strukt/", "/shun/"),
        ("prefix", "root", "suffix"),
    ),
    "restructure": (
        ("re", "struc", "ture"),
        ("/rih/", "/struk/", "/cher/"),
        ("re", "struct", "ure"),
        ("/rih/", "/strukt/", "/cher/"),
        ("prefix", "root", "suffix"),
    ),
    "structure": (
        ("struc", "ture"),
        ("/struk/", "/cher/"),
        ("struct", "ure"),
        ("/strukt/", "/cher/"),
        ("root", "suffix"),
    ),

    # act root
    "reaction": (
        ("re", "ac", "tion"),
        ("/rih/", "/ak/", "/shun/"),
        ("re", "act", "ion"),
        ("/rih/", "/akt/", "/shun/"),
        ("prefix", "root", "suffix"),
    ),
    "interact": (
        ("in", "ter", "act"),
        ("/in/", "/ter/", "/akt/"),
        ("inter", "act"),
        ("/in-ter/", "/akt/"),
        ("prefix", "root"),
    ),
    "inactive": (
        ("in", "ac", "tive"),
        ("/in/", "/ak/", "/tiv/"),
        ("in", "act", "ive"),
        ("/in/", "/akt/", "/tiv/"),
        ("prefix", "root", "suffix"),
    ),
    "action": (
        ("ac", "tion"),
        ("/ak/", "/shun/"),
        ("act", "ion"),
        ("/akt/", "/shun/"),
        ("root", "suffix"),
    ),
    "interaction": (
        ("in", "ter", "ac", "tion"),
        ("/in/", "/ter/", "/ak/", "/shun/"),
        ("inter", "act", "ion"),
        ("/in-ter/", "/akt/", "/shun/"),
        ("prefix", "root", "suffix"),
    ),
    "actor": (
        ("ac", "tor"),
        ("/ak/", "/ter/"),
        ("act", "or"),
        ("/akt/", "/er/"),
        ("root", "suffix"),
    ),
    "activist": (
        ("ac", "tiv", "ist"),
        ("/ak/", "/tiv/", "/ist/"),
        ("act", "iv", "ist"),
        ("/akt/", "/iv/", "/ist/"),
        ("root", "suffix", "suffix"),
    ),
    "counteract": (
        ("coun", "ter", "act"),
        ("/kown/", "/ter/", "/akt/"),
        ("counter", "act"),
        ("/kown-ter/", "/akt/"),
        ("prefix", "root"),
    ),

    # form root
    "reform": (
        ("re", "form"),
        ("/rih/", "/form/"),
        ("re", "form"),
        ("/rih/", "/form/"),
        ("prefix", "root"),
    ),
    "transform": (
        ("trans", "form"),
        ("/tranz/", "/form/"),
        ("trans", "form"),
        ("/tranz/", "/form/"),
        ("prefix", "root"),
    ),
    "uniform": (
        ("u", "ni", "form"),
        ("/yoo/", "/nih/", "/form/"),
        ("uni", "form"),
        ("/yoo-nih/", "/form/"),
        ("prefix", "root"),
    ),
    "transformation": (
        ("trans", "for", "ma", "tion"),
        ("/tranz/", "/for/", "/may/", "/shun/"),
        ("trans", "form", "ation"),
        ("/tranz/", "/form/", "/ay-shun/"),
        ("prefix", "root", "suffix"),
    ),
    "formation": (
        ("for", "ma", "tion"),
        ("/for/", "/may/", "/shun/"),
        ("form", "ation"),
        ("/form/", "/ay-shun/"),
        ("root", "suffix"),
    ),

    # mit / miss root
    "submit": (
        ("sub", "mit"),
        ("/sub/", "/mit/"),
        ("sub", "mit"),
        ("/sub/", "/mit/"),
        ("prefix", "root"),
    ),
    "transmit": (
        ("trans", "mit"),
        ("/tranz/", "/mit/"),
        ("trans", "mit"),
        ("/tranz/", "/mit/"),
        ("prefix", "root"),
    ),
    "permission": (
        ("per", "mis", "sion"),
        ("/per/", "/mis/", "/shun/"),
        ("per", "miss", "ion"),
        ("/per/", "/mis/", "/shun/"),
        ("prefix", "root", "suffix"),
    ),
    "mission": (
        ("mis", "sion"),
        ("/mish/", "/uhn/"),
        ("miss", "ion"),
        ("/mis/", "/shun/"),
        ("root", "suffix"),
    ),
    "submission": (
        ("sub", "mis", "sion"),
        ("/sub/", "/mish/", "/uhn/"),
        ("sub", "miss", "ion"),
        ("/sub/", "/mis/", "/shun/"),
        ("prefix", "root", "suffix"),
    ),

    # aud root
    "audience": (
        ("au", "di", "ence"),
        ("/aw/", "/dee/", "/ents/"),
        ("aud", "ience"),
        ("/awd/", "/ee-ents/"),
        ("root", "suffix"),
    ),
    "audible": (
        ("au", "di", "ble"),
        ("/aw/", "/dih/", "/buhl/"),
        ("aud", "ible"),
        ("/awd/", "/ih-buhl/"),
        ("root", "suffix"),
    ),
    "auditorium": (
        ("au", "di", "to", "ri", "um"),
        ("/aw/", "/dih/", "/tor/", "/ee/", "/um/"),
        ("audi", "torium"),
        ("/aw-dih/", "/tor-ee-um/"),
        ("root", "suffix"),
    ),
    "auditory": (
        ("au", "di", "to", "ry"),
        ("/aw/", "/dih/", "/tor/", "/ee/"),
        ("aud", "itory"),
        ("/awd/", "/ih-tor-ee/"),
        ("root", "suffix"),
    ),
    "audition": (
        ("au", "di", "tion"),
        ("/aw/", "/dih/", "/shun/"),
        ("aud", "ition"),
        ("/awd/", "/ih-shun/"),
        ("root", "suffix"),
    ),
    "inaudible": (
        ("in", "au", "di", "ble"),
        ("/in/", "/aw/", "/dih/", "/buhl/"),
        ("in", "aud", "ible"),
        ("/in/", "/awd/", "/ih-buhl/"),
        ("prefix", "root", "suffix"),
    ),

    # spect / spec root
    "inspect": (
        ("in", "spect"),
        ("/in/", "/spekt/"),
        ("in", "spect"),
        ("/in/", "/spekt/"),
        ("prefix", "root"),
    ),
    "spectator": (
        ("spec", "ta", "tor"),
        ("/spek/", "/tay/", "/ter/"),
        ("spect", "ator"),
        ("/spekt/", "/ay-ter/"),
        ("root", "suffix"),
    ),
    "perspective": (
        ("per", "spec", "tive"),
        ("/per/", "/spek/", "/tiv/"),
        ("per", "spec", "tive"),
        ("/per/", "/spek/", "/tiv/"),
        ("prefix", "root", "suffix"),
    ),
    "speculate": (
        ("spec", "u", "late"),
        ("/spek/", "/yuh/", "/layt/"),
        ("spec", "ulate"),
        ("/spek/", "/yuh-layt/"),
        ("root", "suffix"),
    ),
    "spectacle": (
        ("spec", "ta", "cle"),
        ("/spek/", "/tuh/", "/kul/"),
        ("spect", "acle"),
        ("/spekt/", "/uh-kul/"),
        ("root", "suffix"),
    ),
    "inspector": (
        ("in", "spec", "tor"),
        ("/in/", "/spek/", "/ter/"),
        ("in", "spect", "or"),
        ("/in/", "/spekt/", "/er/"),
        ("prefix", "root", "suffix"),
    ),

    # fer root
    "transfer": (
        ("trans", "fer"),
        ("/tranz/", "/fer/"),
        ("trans", "fer"),
        ("/tranz/", "/fer/"),
        ("prefix", "root"),
    ),
    "prefer": (
        ("pre", "fer"),
        ("/prih/", "/fer/"),
        ("pre", "fer"),
        ("/prih/", "/fer/"),
        ("prefix", "root"),
    ),
    "refer": (
        ("re", "fer"),
        ("/rih/", "/fer/"),
        ("re", "fer"),
        ("/rih/", "/fer/"),
        ("prefix", "root"),
    ),
    "conference": (
        ("con", "fer", "ence"),
        ("/kon/", "/fer/", "/ents/"),
        ("con", "fer", "ence"),
        ("/kon/", "/fer/", "/ents/"),
        ("prefix", "root", "suffix"),
    ),
    "interference": (
        ("in", "ter", "fer", "ence"),
        ("/in/", "/ter/", "/fer/", "/ents/"),
        ("inter", "fer", "ence"),
        ("/in-ter/", "/fer/", "/ents/"),
        ("prefix", "root", "suffix"),
    ),

    # un- / dis- / re- / mis- prefix words
    "rewrite": (
        ("re", "write"),
        ("/rih/", "/rite/"),
        ("re", "write"),
        ("/rih/", "/rite/"),
        ("prefix", "root"),
    ),
    "unclear": (
        ("un", "clear"),
        ("/un/", "/kleer/"),
        ("un", "clear"),
        ("/un/", "/kleer/"),
        ("prefix", "root"),
    ),
    "unfinished": (
        ("un", "fin", "ished"),
        ("/un/", "/fin/", "/isht/"),
        ("un", "finished"),
        ("/un/", "/fin-isht/"),
        ("prefix", "root"),
    ),
    "disagree": (
        ("dis", "a", "gree"),
        ("/dis/", "/uh/", "/gree/"),
        ("dis", "agree"),
        ("/dis/", "/uh-gree/"),
        ("prefix", "root"),
    ),
    "disconnect": (
        ("dis", "con", "nect"),
        ("/dis/", "/kon/", "/nekt/"),
        ("dis", "connect"),
        ("/dis/", "/kuh-nekt/"),
        ("prefix", "root"),
    ),
    "submarine": (
        ("sub", "ma", "rine"),
        ("/sub/", "/muh/", "/reen/"),
        ("sub", "marine"),
        ("/sub/", "/muh-reen/"),
        ("prefix", "root"),
    ),
    "subtract": (
        ("sub", "tract"),
        ("/sub/", "/trakt/"),
        ("sub", "tract"),
        ("/sub/", "/trakt/"),
        ("prefix", "root"),
    ),
    "interstate": (
        ("in", "ter", "state"),
        ("/in/", "/ter/", "/stayt/"),
        ("inter", "state"),
        ("/in-ter/", "/stayt/"),
        ("prefix", "root"),
    ),
    "impossible": (
        ("im", "pos", "si", "ble"),
        ("/im/", "/pos/", "/sih/", "/buhl/"),
        ("im", "possible"),
        ("/im/", "/pos-ih-buhl/"),
        ("prefix", "root"),
    ),
    "incomplete": (
        ("in", "com", "plete"),
        ("/in/", "/kum/", "/pleet/"),
        ("in", "complete"),
        ("/in/", "/kum-pleet/"),
        ("prefix", "root"),
    ),
    "misspell": (
        ("mis", "spell"),
        ("/mis/", "/spel/"),
        ("mis", "spell"),
        ("/mis/", "/spel/"),
        ("prefix", "root"),
    ),
    "misunderstand": (
        ("mis", "un", "der", "stand"),
        ("/mis/", "/un/", "/der/", "/stand/"),
        ("mis", "understand"),
        ("/mis/", "/un-der-stand/"),
        ("prefix", "root"),
    ),
    "misconduct": (
        ("mis", "con", "duct"),
        ("/mis/", "/kon/", "/dukt/"),
        ("mis", "conduct"),
        ("/mis/", "/kon-dukt/"),
        ("prefix", "root"),
    ),

    # Suffix words
    "movement": (
        ("move", "ment"),
        ("/moov/", "/ment/"),
        ("move", "ment"),
        ("/moov/", "/ment/"),
        ("root", "suffix"),
    ),
    "agreement": (
        ("a", "gree", "ment"),
        ("/uh/", "/gree/", "/ment/"),
        ("agree", "ment"),
        ("/uh-gree/", "/ment/"),
        ("root", "suffix"),
    ),
    "statement": (
        ("state", "ment"),
        ("/stayt/", "/ment/"),
        ("state", "ment"),
        ("/stayt/", "/ment/"),
        ("root", "suffix"),
    ),
    "kindness": (
        ("kind", "ness"),
        ("/kind/", "/ness/"),
        ("kind", "ness"),
        ("/kind/", "/ness/"),
        ("root", "suffix"),
    ),
    "darkness": (
        ("dark", "ness"),
        ("/dark/", "/ness/"),
        ("dark", "ness"),
        ("/dark/", "/ness/"),
        ("root", "suffix"),
    ),
    "awareness": (
        ("a", "ware", "ness"),
        ("/uh/", "/wair/", "/ness/"),
        ("aware", "ness"),
        ("/uh-wair/", "/ness/"),
        ("root", "suffix"),
    ),
    "helpful": (
        ("help", "ful"),
        ("/help/", "/ful/"),
        ("help", "ful"),
        ("/help/", "/ful/"),
        ("root", "suffix"),
    ),
    "powerful": (
        ("pow", "er", "ful"),
        ("/pow/", "/er/", "/ful/"),
        ("power", "ful"),
        ("/pow-er/", "/ful/"),
        ("root", "suffix"),
    ),
    "meaningful": (
        ("mean", "ing", "ful"),
        ("/meen/", "/ing/", "/ful/"),
        ("meaning", "ful"),
        ("/meen-ing/", "/ful/"),
        ("root", "suffix"),
    ),
    "homeless": (
        ("home", "less"),
        ("/hohm/", "/les/"),
        ("home", "less"),
        ("/hohm/", "/les/"),
        ("root", "suffix"),
    ),
    "careless": (
        ("care", "less"),
        ("/kair/", "/les/"),
        ("care", "less"),
        ("/kair/", "/les/"),
        ("root", "suffix"),
    ),
    "powerless": (
        ("pow", "er", "less"),
        ("/pow/", "/er/", "/les/"),
        ("power", "less"),
        ("/pow-er/", "/les/"),
        ("root", "suffix"),
    ),
    "readable": (
        ("read", "a", "ble"),
        ("/reed/", "/uh/", "/buhl/"),
        ("read", "able"),
        ("/reed/", "/uh-buhl/"),
        ("root", "suffix"),
    ),
    "comfortable": (
        ("com", "fort", "a", "ble"),
        ("/kum/", "/fert/", "/uh/", "/buhl/"),
        ("comfort", "able"),
        ("/kum-fert/", "/uh-buhl/"),
        ("root", "suffix"),
    ),
    "remarkable": (
        ("re", "mark", "a", "ble"),
        ("/rih/", "/mark/", "/uh/", "/buhl/"),
        ("re", "mark", "able"),
        ("/rih/", "/mark/", "/uh-buhl/"),
        ("prefix", "root", "suffix"),
    ),
    "teacher": (
        ("teach", "er"),
        ("/teech/", "/er/"),
        ("teach", "er"),
        ("/teech/", "/er/"),
        ("root", "suffix"),
    ),
    "quickly": (
        ("quick", "ly"),
        ("/kwik/", "/lee/"),
        ("quick", "ly"),
        ("/kwik/", "/lee/"),
        ("root", "suffix"),
    ),
    "clearly": (
        ("clear", "ly"),
        ("/kleer/", "/lee/"),
        ("clear", "ly"),
        ("/kleer/", "/lee/"),
        ("root", "suffix"),
    ),
    "accurately": (
        ("ac", "cu", "rate", "ly"),
        ("/ak/", "/kyuh/", "/rit/", "/lee/"),
        ("accurate", "ly"),
        ("/ak-kyuh-rit/", "/lee/"),
        ("root", "suffix"),
    ),
    "scientist": (
        ("sci", "en", "tist"),
        ("/sie/", "/en/", "/tist/"),
        ("scient", "ist"),
        ("/sie-ent/", "/ist/"),
        ("root", "suffix"),
    ),
    "dangerous": (
        ("dan", "ger", "ous"),
        ("/dayn/", "/jer/", "/us/"),
        ("danger", "ous"),
        ("/dayn-jer/", "/us/"),
        ("root", "suffix"),
    ),
    "famous": (
        ("fa", "mous"),
        ("/fay/", "/mus/"),
        ("fam", "ous"),
        ("/faym/", "/us/"),
        ("root", "suffix"),
    ),
    "courageous": (
        ("cou", "ra", "geous"),
        ("/kuh/", "/ray/", "/jus/"),
        ("courage", "ous"),
        ("/ker-ij/", "/us/"),
        ("root", "suffix"),
    ),

    # Other prefix words
    "nonfiction": (
        ("non", "fic", "tion"),
        ("/non/", "/fik/", "/shun/"),
        ("non", "fiction"),
        ("/non/", "/fik-shun/"),
        ("prefix", "root"),
    ),
    "semifinal": (
        ("sem", "i", "fi", "nal"),
        ("/sem/", "/ee/", "/fie/", "/nul/"),
        ("semi", "final"),
        ("/sem-ee/", "/fie-nul/"),
        ("prefix", "root"),
    ),
    "multicultural": (
        ("mul", "ti", "cul", "tur", "al"),
        ("/mul/", "/tih/", "/kul/", "/cher/", "/ul/"),
        ("multi", "cultural"),
        ("/mul-tih/", "/kul-cher-ul/"),
        ("prefix", "root"),
    ),
    "bilingual": (
        ("bi", "lin", "gual"),
        ("/bie/", "/ling/", "/gwul/"),
        ("bi", "lingual"),
        ("/bie/", "/ling-gwul/"),
        ("prefix", "root"),
    ),
    "postwar": (
        ("post", "war"),
        ("/pohst/", "/wor/"),
        ("post", "war"),
        ("/pohst/", "/wor/"),
        ("prefix", "root"),
    ),
    "context": (
        ("con", "text"),
        ("/kon/", "/tekst/"),
        ("con", "text"),
        ("/kon/", "/tekst/"),
        ("prefix", "root"),
    ),
}
